import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ipd_tournament.engine import C, D
from ipd_tournament.strategies.base import BaseStrategy


class StubRng:
    """Replays a fixed list of draws for random()."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        value = self.values[self.calls]
        self.calls += 1
        return value


class Schedule(BaseStrategy):
    """Plays a fixed sequence of moves regardless of the opponent."""

    def __init__(self, moves):
        self.moves = [C if m == "C" else D for m in moves]
        super().__init__()

    def decide(self, my_history, opp_history):
        return self.moves[len(my_history)]


class AlwaysCooperate(BaseStrategy):
    def decide(self, my_history, opp_history):
        return C


class AlwaysBetray(BaseStrategy):
    def decide(self, my_history, opp_history):
        return D


class Alternator(BaseStrategy):
    def decide(self, my_history, opp_history):
        return C if len(my_history) % 2 == 0 else D


def feed(strategy, opp_moves):
    """Call decide once per round against a scripted opponent.

    Returns the strategy's moves, one per opponent move plus the next one.
    """
    opp = [C if m == "C" else D for m in opp_moves]
    own = []
    for t in range(len(opp) + 1):
        mine = strategy.decide(tuple(own), tuple(opp[:t]))
        own.append(mine)
    return "".join(m.value for m in own)


@pytest.fixture
def stub_rng():
    return StubRng
