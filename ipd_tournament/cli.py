import argparse
import json
import logging
import os
from typing import List, Optional, Sequence

from .config import ConfigError, TournamentConfig
from .log import init_logging
from .records import format_ranking, write_results
from .tournament import list_available_strategies, run_tournament

logger = logging.getLogger(__name__)

RESULTS_JSON_FILE = "results.json"


def _split(value: str) -> List[str]:
    return [x.strip() for x in value.split(",") if x.strip()] if value else []


def _pick(value, default):
    return default if value is None else value


def build_parser() -> argparse.ArgumentParser:
    # Unset options stay None so IPD_* environment defaults can fill them in.
    parser = argparse.ArgumentParser(description="Iterated Prisoner's Dilemma round-robin tournament")
    parser.add_argument("--rounds", type=int, default=None, help="Rounds per match (env IPD_ROUNDS, default 400)")
    parser.add_argument("--matches", type=int, default=None, help="Independent matches per ordered pair (env IPD_MATCHES, default 100)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (env IPD_SEED)")
    parser.add_argument("--workers", type=int, default=None, help="Worker processes (env IPD_WORKERS, default 1)")
    parser.add_argument("--out-dir", type=str, default=None, help="Directory for output files (env OUT_DIR, default .)")
    parser.add_argument("--only", type=str, default="", help="Comma separated strategy names to include")
    parser.add_argument("--exclude", type=str, default="", help="Comma separated strategy names to exclude")
    parser.add_argument("--format", type=str, default="csv", choices=["csv", "json"], help="Output format")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    parser.add_argument("--log-level", type=str, default="INFO", help="Logging level")
    parser.add_argument("--log-file", type=str, default="", help="Also log to this file")
    parser.add_argument("--labels", action="store_true", help="List strategy ids and names and exit")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.labels:
        for info in list_available_strategies():
            print(f"{info['id']:2} {info['name']}")
        return 0

    try:
        defaults = TournamentConfig.from_env()
    except ConfigError as exc:
        raise SystemExit(str(exc))

    init_logging(args.log_level, args.log_file or None)

    config = TournamentConfig(
        rounds_per_match=_pick(args.rounds, defaults.rounds_per_match),
        matches_per_pair=_pick(args.matches, defaults.matches_per_pair),
        seed=_pick(args.seed, defaults.seed),
        workers=_pick(args.workers, defaults.workers),
        out_dir=_pick(args.out_dir, defaults.out_dir),
        only=_split(args.only),
        exclude=_split(args.exclude),
    )
    try:
        config.validate()
        result = run_tournament(
            rounds=config.rounds_per_match,
            repeats=config.matches_per_pair,
            seed=config.seed,
            only=config.only,
            exclude=config.exclude,
            workers=config.workers,
            progress=not args.no_progress,
        )
    except ValueError as exc:
        raise SystemExit(str(exc))

    try:
        if args.format == "csv":
            paths = write_results(config.out_dir, result.matches, result.ranking)
        else:
            os.makedirs(config.out_dir, exist_ok=True)
            path = os.path.join(config.out_dir, RESULTS_JSON_FILE)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(result.to_dict(), f, indent=2)
            paths = [path]
    except OSError:
        logger.exception("Failed to write results to %s", config.out_dir)
        raise

    print(format_ranking(result.ranking, config.matches_per_pair, config.rounds_per_match))
    logger.info("Results written to %s", ", ".join(paths))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
