import random
from collections.abc import Iterator
from datetime import date
from datetime import datetime
from datetime import time
from datetime import timedelta


WORKDAY_START_HOUR = 9
WORKDAY_END_HOUR = 21
GIT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_default_rng = random.Random()


class DayRange:
    """Restartable iterable over every day from `start` to `end` inclusive."""

    def __init__(self, start: date, end: date) -> None:
        if start > end:
            raise ValueError("start must be before or equal to end")
        self.start = start
        self.end = end

    def __iter__(self) -> Iterator[date]:
        current_day = self.start
        while current_day <= self.end:
            yield current_day
            current_day += timedelta(days=1)

    def __len__(self) -> int:
        return (self.end - self.start).days + 1

    def __repr__(self) -> str:
        return f"DayRange({self.start.isoformat()}, {self.end.isoformat()})"


def day_range(start: date, end: date) -> DayRange:
    return DayRange(start, end)


def format_commit_timestamp(day: date, rng: random.Random | None = None) -> str:
    """Combine `day` with a random time inside working hours.

    The result uses git's `YYYY-MM-DD HH:MM:SS` form and is interpreted in
    the local timezone.
    """

    rng = rng or _default_rng
    moment = datetime.combine(
        day,
        time(
            hour=rng.randint(WORKDAY_START_HOUR, WORKDAY_END_HOUR),
            minute=rng.randint(0, 59),
            second=rng.randint(0, 59),
        ),
    )
    return moment.strftime(GIT_DATE_FORMAT)
