import argparse
import logging
import random
import sys
from collections.abc import Mapping
from collections.abc import Sequence

from pydantic import ValidationError

from graphfill.core.observability import configure_logging
from graphfill.core.observability import init_sentry
from graphfill.core.observability import report_exception
from graphfill.git_client import GitRepository
from graphfill.models import RunSummary
from graphfill.patterns import PATTERNS
from graphfill.patterns import get_pattern
from graphfill.services.fill_service import run_fill_mode
from graphfill.services.pattern_service import MisalignedPatternStartError
from graphfill.services.pattern_service import UnknownPatternError
from graphfill.services.pattern_service import check_alignment
from graphfill.services.pattern_service import run_pattern_mode
from graphfill.settings import Settings


logger = logging.getLogger(__name__)

MODES = ("fill", "pattern")
DEFAULT_PATTERN = "HI"

NEXT_STEPS = """\
Next steps:
    git remote add origin https://github.com/<you>/<repo>.git
    git branch -M main
    git push -u origin main"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphfill",
        description="Fill a contribution calendar with backdated commits.",
    )
    parser.add_argument(
        "--mode",
        default="fill",
        help="fill: random commits across a date range; pattern: draw a shape",
    )
    parser.add_argument(
        "pattern",
        nargs="?",
        default=DEFAULT_PATTERN,
        help=f"pattern to draw in pattern mode (default: {DEFAULT_PATTERN})",
    )
    parser.add_argument(
        "--repo",
        default=".",
        help="working tree to write commits into (default: current directory)",
    )
    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="print the available pattern names and exit",
    )
    return parser


def _fail(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def print_summary(summary: RunSummary) -> None:
    if summary.mode == "fill":
        print(f"Done! {summary.commits} commits across {summary.days} days.")
    else:
        print(
            f"Done! {summary.commits} pattern commits across {summary.days} lit cells."
        )
    print()
    print(NEXT_STEPS)


def main(
    argv: Sequence[str] | None = None,
    rng: random.Random | None = None,
    overrides: Mapping[str, object] | None = None,
) -> int:
    """Run one mode and return the process exit code.

    `overrides` replaces individual `Settings` defaults for this run.
    """

    args = build_parser().parse_args(argv)

    if args.list_patterns:
        for name, grid in PATTERNS.items():
            print(f"{name}  ({grid.weeks} weeks, {grid.lit_count()} lit cells)")
        return 0

    mode = args.mode.strip().lower()
    if mode not in MODES:
        return _fail(f'Unknown mode "{args.mode}". Use "fill" or "pattern".')

    try:
        settings = Settings(**dict(overrides or {}))
    except ValidationError as exc:
        return _fail(f"Invalid configuration:\n{exc}")

    configure_logging(settings.log_level)
    init_sentry(settings)

    if mode == "pattern":
        try:
            pattern_name, grid = get_pattern(args.pattern)
            check_alignment(
                settings.pattern_start_date, settings.strict_pattern_alignment
            )
        except (UnknownPatternError, MisalignedPatternStartError) as exc:
            return _fail(str(exc))

    repo = GitRepository(args.repo)
    try:
        repo.ensure_repo()
        if mode == "fill":
            summary = run_fill_mode(repo, settings, rng=rng)
        else:
            summary = run_pattern_mode(
                repo,
                pattern_name=pattern_name,
                grid=grid,
                start=settings.pattern_start_date,
                commits_per_cell=settings.pattern_commits,
                activity_file=settings.activity_file,
                rng=rng,
            )
    except Exception as exc:
        logger.exception("Fatal error, aborting run")
        report_exception(exc)
        return 1

    print_summary(summary)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
