"""Flat record streams produced by a tournament and their serializers."""

from __future__ import annotations

import csv
import os
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Sequence

MATCH_HEADER = ["PlayerA", "PlayerB", "TotalA", "TotalB", "AvgA", "AvgB"]
RANKING_HEADER = ["Rank", "Strategy", "TotalScore", "AvgScorePerGame"]

MATCH_RESULTS_FILE = "match_results.csv"
RANKING_FILE = "ranking.csv"


def _one_decimal(value: float) -> str:
    return f"{value:.1f}"


@dataclass(frozen=True)
class MatchRecord:
    """Totals for one ordered pairing summed over ``matches`` repetitions."""

    player_a: str
    player_b: str
    total_a: int
    total_b: int
    matches: int

    @property
    def avg_a(self) -> float:
        return self.total_a / self.matches

    @property
    def avg_b(self) -> float:
        return self.total_b / self.matches

    def to_row(self) -> List[str]:
        return [
            self.player_a,
            self.player_b,
            str(self.total_a),
            str(self.total_b),
            _one_decimal(self.avg_a),
            _one_decimal(self.avg_b),
        ]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "PlayerA": self.player_a,
            "PlayerB": self.player_b,
            "TotalA": self.total_a,
            "TotalB": self.total_b,
            "AvgA": round(self.avg_a, 1),
            "AvgB": round(self.avg_b, 1),
        }


@dataclass(frozen=True)
class RankingEntry:
    rank: int
    name: str
    total_score: int
    avg_score: float

    def to_row(self) -> List[str]:
        return [str(self.rank), self.name, str(self.total_score), _one_decimal(self.avg_score)]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Rank": self.rank,
            "Strategy": self.name,
            "TotalScore": self.total_score,
            "AvgScorePerGame": round(self.avg_score, 1),
        }


def write_csv(path: str, header: Sequence[str], rows: Iterable[Sequence[str]]) -> None:
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(list(header))
        for row in rows:
            w.writerow(list(row))


def write_results(out_dir: str, matches: Sequence[MatchRecord], ranking: Sequence[RankingEntry]) -> List[str]:
    """Write both record streams into ``out_dir`` and return the file paths."""
    os.makedirs(out_dir, exist_ok=True)
    match_path = os.path.join(out_dir, MATCH_RESULTS_FILE)
    ranking_path = os.path.join(out_dir, RANKING_FILE)
    write_csv(match_path, MATCH_HEADER, (m.to_row() for m in matches))
    write_csv(ranking_path, RANKING_HEADER, (r.to_row() for r in ranking))
    return [match_path, ranking_path]


def format_ranking(ranking: Sequence[RankingEntry], matches_per_pair: int, rounds: int) -> str:
    lines = [f"=== Final ranking ({matches_per_pair} matches x {rounds} rounds) ==="]
    for entry in ranking:
        lines.append(f"{entry.rank:2}. {entry.name:20} {entry.total_score:>8} {entry.avg_score:>10.2f}")
    return "\n".join(lines)
