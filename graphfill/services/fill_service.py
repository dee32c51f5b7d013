import logging
import random

from graphfill.models import CommitSpec
from graphfill.models import RunSummary
from graphfill.services.calendar_service import day_range
from graphfill.services.calendar_service import format_commit_timestamp
from graphfill.services.commit_service import CommitTarget
from graphfill.services.commit_service import make_commit
from graphfill.settings import Settings


logger = logging.getLogger(__name__)

PROGRESS_EVERY_DAYS = 30


def render_commit_message(template: str, n: int, iso_date: str) -> str:
    return template.format(n=n, date=iso_date)


def run_fill_mode(
    repo: CommitTarget,
    settings: Settings,
    rng: random.Random | None = None,
) -> RunSummary:
    """Create a random number of commits on every day of the configured range."""

    rng = rng or random.Random()
    date_range = settings.date_range()
    density = settings.density()

    logger.info(
        "Fill mode: %s -> %s, %d-%d commits per day",
        date_range.start.isoformat(),
        date_range.end.isoformat(),
        density.min_commits,
        density.max_commits,
    )

    summary = RunSummary(mode="fill")
    for current_day in day_range(date_range.start, date_range.end):
        iso_date = current_day.isoformat()
        commits_today = rng.randint(density.min_commits, density.max_commits)

        for n in range(1, commits_today + 1):
            spec = CommitSpec(
                timestamp=format_commit_timestamp(current_day, rng),
                message=render_commit_message(settings.commit_message, n, iso_date),
            )
            make_commit(repo, settings.activity_file, spec)
            summary.commits += 1

        summary.days += 1
        if summary.days % PROGRESS_EVERY_DAYS == 0:
            logger.info(
                "Processed %d days (%d commits so far)", summary.days, summary.commits
            )

    logger.info("Done: %d commits across %d days", summary.commits, summary.days)
    return summary
