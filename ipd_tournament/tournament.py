"""Shared tournament helpers used by both CLI and the web UI."""

from __future__ import annotations

import logging
import random
from concurrent.futures import ProcessPoolExecutor
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple, Type

from tqdm import tqdm

from .engine import DEFAULT_PAYOFFS, simulate
from .records import MatchRecord, RankingEntry
from . import strategies as S
from .strategies import BaseStrategy, UnknownStrategyError, create_strategy

logger = logging.getLogger(__name__)

StrategyClass = Type[BaseStrategy]
CatalogueEntry = Tuple[int, StrategyClass]
# (id_a, id_b, rounds, repeats, seed)
Cell = Tuple[int, int, int, int, Optional[int]]


def _canon(name: str) -> str:
    """Normalize a strategy name for comparisons."""
    return name.lower().strip().replace("-", "").replace("_", "")


def list_available_strategies() -> List[Dict[str, Any]]:
    """Return metadata about all built-in strategies."""
    items: List[Dict[str, Any]] = []
    for strategy_id, cls in S.CATALOGUE:
        items.append({
            "id": strategy_id,
            "name": cls.label(),
            "description": (cls.__doc__ or "").strip(),
        })
    return items


def _lookup(names: Sequence[str]) -> set:
    known = {_canon(cls.label()): cls for _, cls in S.CATALOGUE}
    selected = set()
    for name in names:
        if not isinstance(name, str):
            raise UnknownStrategyError(f"Strategy names must be strings, got {name!r}")
        key = _canon(name)
        if key not in known:
            raise UnknownStrategyError(f"Unknown strategy {name!r}")
        selected.add(key)
    return selected


def resolve_strategies(only: Sequence[str] | None = None, exclude: Sequence[str] | None = None) -> List[CatalogueEntry]:
    """Select catalogue entries based on optional inclusion/exclusion lists."""
    only_canon = _lookup(only) if only else None
    exclude_canon = _lookup(exclude) if exclude else set()

    selected: List[CatalogueEntry] = []
    for strategy_id, cls in S.CATALOGUE:
        name = _canon(cls.label())
        if only_canon is not None and name not in only_canon:
            continue
        if name in exclude_canon:
            continue
        selected.append((strategy_id, cls))
    return selected


def run_pair(id_a: int, id_b: int, rounds: int, repeats: int, seed: Optional[int] = None) -> Tuple[int, int]:
    """Play ``repeats`` independent matches with fresh strategies each time.

    Returns the summed scores of both sides.
    """
    rng = random.Random(seed) if seed is not None else None
    total_a = 0
    total_b = 0
    for _ in range(repeats):
        player_a = create_strategy(id_a, rng)
        player_b = create_strategy(id_b, rng)
        score_a, score_b = simulate(player_a, player_b, rounds)
        total_a += score_a
        total_b += score_b
    return total_a, total_b


def _run_cell(cell: Cell) -> Tuple[int, int]:
    return run_pair(*cell)


def _play_cells(cells: List[Cell], workers: int) -> Iterator[Tuple[int, int]]:
    if workers <= 1:
        for cell in cells:
            yield _run_cell(cell)
        return
    logger.info("Using %d worker processes", workers)
    with ProcessPoolExecutor(max_workers=workers) as executor:
        # map keeps cell order, so aggregation does not depend on scheduling
        yield from executor.map(_run_cell, cells, chunksize=max(1, len(cells) // (workers * 4)))


@dataclass
class TournamentResult:
    params: Dict[str, Any]
    strategies: List[str]
    matches: List[MatchRecord] = field(default_factory=list)
    ranking: List[RankingEntry] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "params": dict(self.params),
            "strategies": list(self.strategies),
            "matches": [m.to_dict() for m in self.matches],
            "ranking": [r.to_dict() for r in self.ranking],
        }


def build_ranking(totals: Dict[str, int], repeats: int) -> List[RankingEntry]:
    """Sort strategies by total score, highest first; ties by name."""
    ordered = sorted(totals.items(), key=lambda item: (-item[1], item[0]))
    return [
        RankingEntry(rank=i + 1, name=name, total_score=score, avg_score=score / repeats)
        for i, (name, score) in enumerate(ordered)
    ]


def run_tournament(
    *,
    rounds: int = 400,
    repeats: int = 100,
    seed: int | None = None,
    only: Sequence[str] | None = None,
    exclude: Sequence[str] | None = None,
    workers: int = 1,
    progress: bool = True,
) -> TournamentResult:
    """Run a full round-robin over every ordered pair, self-play included."""
    if rounds < 1:
        raise ValueError(f"rounds must be positive, got {rounds}")
    if repeats < 1:
        raise ValueError(f"repeats must be positive, got {repeats}")

    entries = resolve_strategies(only=only, exclude=exclude)
    if not entries:
        raise ValueError("Need at least one strategy to run a tournament")

    master = random.Random(seed) if seed is not None else None
    cells: List[Cell] = []
    for id_a, _ in entries:
        for id_b, _ in entries:
            cell_seed = master.getrandbits(64) if master is not None else None
            cells.append((id_a, id_b, rounds, repeats, cell_seed))

    names = {strategy_id: cls.label() for strategy_id, cls in entries}
    logger.info(
        "Running %d strategies, %d pairings, %d matches x %d rounds each",
        len(entries), len(cells), repeats, rounds,
    )

    totals: Dict[str, int] = {names[strategy_id]: 0 for strategy_id, _ in entries}
    matches: List[MatchRecord] = []
    results = _play_cells(cells, workers)
    for cell, (total_a, total_b) in tqdm(
        zip(cells, results), total=len(cells), desc="Pairings", disable=not progress
    ):
        id_a, id_b = cell[0], cell[1]
        record = MatchRecord(
            player_a=names[id_a],
            player_b=names[id_b],
            total_a=total_a,
            total_b=total_b,
            matches=repeats,
        )
        matches.append(record)
        totals[record.player_a] += total_a
        totals[record.player_b] += total_b
        logger.debug("%s vs %s: %d / %d", record.player_a, record.player_b, total_a, total_b)

    return TournamentResult(
        params={
            "rounds": rounds,
            "repeats": repeats,
            "seed": seed,
            "workers": workers,
            "payoffs": asdict(DEFAULT_PAYOFFS),
        },
        strategies=[cls.label() for _, cls in entries],
        matches=matches,
        ranking=build_ranking(totals, repeats),
    )
