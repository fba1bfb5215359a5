import argparse
import json
import sys

from loguru import logger

from .config import RegattaConfigError
from .io import load_results_from_json, to_jsonable
from .models import ResultsFormatError, Standing, TeamResult, Trophy
from .systems import SCORING_SYSTEMS, UnknownScoringSystem, get_system


def _configure_logging(verbose):
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>",
        level="DEBUG" if verbose else "WARNING",
    )


def _print_row(row):
    if isinstance(row, Standing):
        print(f"{row.place}. {row.name} - {row.points:g}")
    elif isinstance(row, TeamResult):
        size = row.team_size if row.team_size is not None else "?"
        print(f"{row.place}. {row.team} ({size}) - {row.points:g}")
    elif isinstance(row, Trophy):
        winner = f"{row.winner} ({row.winner_club}) {row.winner_time}" if row.winner else "-"
        print(f"{row.name or '  (tie)'}: {winner}")
    else:
        print(row)


def print_tables(output, title=""):
    if isinstance(output, dict):
        for key, value in output.items():
            print_tables(value, f"{title} / {key}" if title else str(key))
    elif isinstance(output, (set, frozenset)):
        print(f"{title}: {len(output)}")
    elif isinstance(output, list):
        print(f"\n{title}")
        for row in output:
            _print_row(row)
    else:
        print(f"{title}: {output}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Compute regatta team points from a CrewTimer results export")
    parser.add_argument("--input", required=True, help="Path to a results export (JSON)")
    parser.add_argument(
        "--system",
        default="Basic",
        help="Scoring system: " + ", ".join(s.key for s in SCORING_SYSTEMS),
    )
    parser.add_argument("--unscaled", action="store_true", help="Barnes: do not scale junior/novice events")
    parser.add_argument("--coed-only", action="store_true", help="Barnes/Sprints: only co-ed teams score combined points")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--verbose", "-v", action="store_true")

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        system = get_system(args.system)
        results = load_results_from_json(args.input)
        output = system.calculate(results, scaled=not args.unscaled, coed_only=args.coed_only)
    except UnknownScoringSystem:
        logger.error(f"Unknown scoring system {args.system!r}")
        return 1
    except (OSError, ResultsFormatError, RegattaConfigError) as e:
        logger.error(str(e))
        return 1

    if args.json:
        print(json.dumps(to_jsonable(output), indent=2))
    else:
        print(system.name)
        print_tables(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
