import logging
import random
from collections.abc import Sequence
from datetime import date
from datetime import timedelta

from pydantic import ValidationError

from graphfill.models import BLANK
from graphfill.models import WEEKDAYS
from graphfill.models import CommitSpec
from graphfill.models import PatternGrid
from graphfill.models import RunSummary
from graphfill.services.calendar_service import format_commit_timestamp
from graphfill.services.commit_service import CommitTarget
from graphfill.services.commit_service import make_commit


logger = logging.getLogger(__name__)


class InvalidPatternError(Exception):
    """Raised when a pattern grid is not a well-formed 7-row grid."""


class UnknownPatternError(Exception):
    """Raised when a pattern name is not in the catalogue."""

    def __init__(self, name: str, available: Sequence[str]) -> None:
        self.name = name
        self.available = list(available)
        super().__init__(
            f'Unknown pattern "{name}". Available: {", ".join(self.available)}'
        )


class MisalignedPatternStartError(Exception):
    """Raised when strict alignment is on and the start date is not a Sunday."""


def _as_grid(pattern: PatternGrid | Sequence[str]) -> PatternGrid:
    if isinstance(pattern, PatternGrid):
        return pattern
    try:
        return PatternGrid(rows=tuple(pattern))
    except ValidationError as exc:
        raise InvalidPatternError(str(exc)) from exc


def combine_patterns(*patterns: PatternGrid | Sequence[str]) -> PatternGrid:
    """Join grids left to right with one blank column between neighbours."""

    if not patterns:
        raise InvalidPatternError("at least one pattern is required")

    grids = [_as_grid(pattern) for pattern in patterns]
    rows = []
    for weekday in range(WEEKDAYS):
        rows.append(BLANK.join(grid.rows[weekday] for grid in grids))
    return PatternGrid(rows=tuple(rows))


def pattern_cell_date(start: date, week: int, weekday: int) -> date:
    return start + timedelta(days=week * 7 + weekday)


def is_sunday(day: date) -> bool:
    return day.weekday() == 6


def check_alignment(start: date, strict: bool) -> None:
    if is_sunday(start):
        return
    message = (
        f"pattern start date {start.isoformat()} is a {start.strftime('%A')}, "
        "not a Sunday; rows will not line up with the calendar"
    )
    if strict:
        raise MisalignedPatternStartError(message)
    logger.warning(message)


def render_pattern_message(name: str, k: int, iso_date: str) -> str:
    return f'Pattern "{name}" commit #{k} on {iso_date}'


def run_pattern_mode(
    repo: CommitTarget,
    pattern_name: str,
    grid: PatternGrid,
    start: date,
    commits_per_cell: int,
    activity_file: str,
    rng: random.Random | None = None,
) -> RunSummary:
    """Draw `grid` on the calendar starting at the week of `start`.

    Weeks are walked left to right and weekdays top to bottom. Every lit
    cell receives `commits_per_cell` commits on its calendar date.
    """

    rng = rng or random.Random()
    logger.info(
        'Pattern mode: "%s" starting %s, %d commits per lit cell',
        pattern_name,
        start.isoformat(),
        commits_per_cell,
    )

    summary = RunSummary(mode="pattern")
    for week, weekday in grid.lit_cells():
        target_day = pattern_cell_date(start, week, weekday)
        iso_date = target_day.isoformat()

        for k in range(1, commits_per_cell + 1):
            spec = CommitSpec(
                timestamp=format_commit_timestamp(target_day, rng),
                message=render_pattern_message(pattern_name, k, iso_date),
            )
            make_commit(repo, activity_file, spec)
            summary.commits += 1

        summary.days += 1

    logger.info("Done: %d pattern commits created", summary.commits)
    return summary
