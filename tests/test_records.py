import csv

from ipd_tournament.records import (
    MATCH_HEADER,
    RANKING_HEADER,
    MatchRecord,
    RankingEntry,
    format_ranking,
    write_results,
)


def _read(path):
    with open(path, newline="", encoding="utf-8") as f:
        return list(csv.reader(f))


def test_match_record_row_formatting():
    record = MatchRecord("TitForTat", "Joss", total_a=2345, total_b=2401, matches=3)
    assert record.to_row() == ["TitForTat", "Joss", "2345", "2401", "781.7", "800.3"]


def test_ranking_entry_row_formatting():
    entry = RankingEntry(rank=1, name="Grudger", total_score=1000, avg_score=1000 / 3)
    assert entry.to_row() == ["1", "Grudger", "1000", "333.3"]


def test_write_results(tmp_path):
    matches = [
        MatchRecord("A", "A", 30, 30, 1),
        MatchRecord("A", "B", 0, 50, 1),
    ]
    ranking = [RankingEntry(1, "B", 50, 50.0), RankingEntry(2, "A", 60, 60.0)]
    match_path, ranking_path = write_results(str(tmp_path / "out"), matches, ranking)

    rows = _read(match_path)
    assert rows[0] == MATCH_HEADER
    assert rows[2] == ["A", "B", "0", "50", "0.0", "50.0"]

    rows = _read(ranking_path)
    assert rows[0] == RANKING_HEADER
    assert rows[1] == ["1", "B", "50", "50.0"]
    assert len(rows) == 3


def test_format_ranking():
    text = format_ranking([RankingEntry(1, "Davis", 1234, 12.34)], matches_per_pair=100, rounds=400)
    lines = text.splitlines()
    assert lines[0] == "=== Final ranking (100 matches x 400 rounds) ==="
    assert lines[1].split() == ["1.", "Davis", "1234", "12.34"]
