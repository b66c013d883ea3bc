from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple


class Action(str, Enum):
    COOPERATE = "C"
    BETRAY = "D"

    def __str__(self) -> str:
        return self.value


C = Action.COOPERATE
D = Action.BETRAY


@dataclass(frozen=True)
class Payoffs:
    T: int = 5  # Temptation to betray
    R: int = 3  # Reward for mutual cooperation
    P: int = 1  # Punishment for mutual betrayal
    S: int = 0  # Sucker payoff


DEFAULT_PAYOFFS = Payoffs()


def play_round(a: Action, b: Action, p: Payoffs = DEFAULT_PAYOFFS) -> Tuple[int, int]:
    if a == C and b == C:
        return p.R, p.R
    if a == C and b == D:
        return p.S, p.T
    if a == D and b == C:
        return p.T, p.S
    return p.P, p.P


class HistoryView(Sequence):
    """Read-only window onto a history list that the engine keeps appending to.

    Slices come back as tuples.
    """

    __slots__ = ("_data",)

    def __init__(self, data: List[Action]):
        self._data = data

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(self._data[index])
        return self._data[index]

    def __iter__(self):
        return iter(self._data)

    def __contains__(self, item) -> bool:
        return item in self._data

    def count(self, item) -> int:
        return self._data.count(item)

    def __repr__(self) -> str:
        return "HistoryView(%r)" % "".join(self._data)


@dataclass
class MatchResult:
    rounds: int
    score_a: int
    score_b: int
    history_a: str
    history_b: str

    @property
    def scores(self) -> Tuple[int, int]:
        return self.score_a, self.score_b


def play_match(playerA, playerB, rounds: int, payoffs: Payoffs = DEFAULT_PAYOFFS) -> MatchResult:
    """Play ``rounds`` simultaneous rounds between two strategies.

    Both players are reset first. Each round both decisions are taken from the
    histories as they stood before the round, so neither side sees the other's
    current move. Zero rounds give a scoreless match.
    """
    playerA.reset()
    playerB.reset()
    a_hist: List[Action] = []
    b_hist: List[Action] = []
    total_a = 0
    total_b = 0
    a_view = HistoryView(a_hist)
    b_view = HistoryView(b_hist)
    for _ in range(rounds):
        a_move = Action(playerA.decide(a_view, b_view))
        b_move = Action(playerB.decide(b_view, a_view))  # symmetric view
        s_a, s_b = play_round(a_move, b_move, payoffs)
        total_a += s_a
        total_b += s_b
        a_hist.append(a_move)
        b_hist.append(b_move)
    return MatchResult(
        rounds=rounds,
        score_a=total_a,
        score_b=total_b,
        history_a="".join(m.value for m in a_hist),
        history_b="".join(m.value for m in b_hist),
    )


def simulate(playerA, playerB, rounds: int) -> Tuple[int, int]:
    """Return the pair of cumulative scores for one match."""
    return play_match(playerA, playerB, rounds).scores
