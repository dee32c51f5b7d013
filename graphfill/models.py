from collections.abc import Iterator
from datetime import date
from typing import Literal

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator


LIT = "#"
BLANK = "."
WEEKDAYS = 7


class DateRange(BaseModel):
    """Inclusive range of calendar days."""

    model_config = ConfigDict(frozen=True)

    start: date
    end: date

    @model_validator(mode="after")
    def check_order(self) -> "DateRange":
        if self.start > self.end:
            raise ValueError("start must be before or equal to end")
        return self


class DensityConfig(BaseModel):
    """Bounds for the number of commits drawn for a single day."""

    model_config = ConfigDict(frozen=True)

    min_commits: int = Field(ge=0)
    max_commits: int = Field(ge=0)

    @model_validator(mode="after")
    def check_bounds(self) -> "DensityConfig":
        if self.min_commits > self.max_commits:
            raise ValueError("min_commits must be less than or equal to max_commits")
        return self


class PatternGrid(BaseModel):
    """Seven rows (Sunday..Saturday) of `#`/`.` cells, one column per week."""

    model_config = ConfigDict(frozen=True)

    rows: tuple[str, ...]

    @field_validator("rows")
    @classmethod
    def check_shape(cls, rows: tuple[str, ...]) -> tuple[str, ...]:
        if len(rows) != WEEKDAYS:
            raise ValueError(f"pattern must have exactly {WEEKDAYS} rows, got {len(rows)}")

        widths = {len(row) for row in rows}
        if len(widths) != 1:
            raise ValueError("pattern rows must all have the same length")

        for row in rows:
            foreign = set(row) - {LIT, BLANK}
            if foreign:
                raise ValueError(
                    f"pattern cells must be '{LIT}' or '{BLANK}', got {sorted(foreign)!r}"
                )
        return rows

    @property
    def weeks(self) -> int:
        return len(self.rows[0])

    def is_lit(self, week: int, weekday: int) -> bool:
        return self.rows[weekday][week] == LIT

    def lit_cells(self) -> Iterator[tuple[int, int]]:
        """Yield `(week, weekday)` for lit cells, column by column."""

        for week in range(self.weeks):
            for weekday in range(WEEKDAYS):
                if self.is_lit(week, weekday):
                    yield week, weekday

    def lit_count(self) -> int:
        return sum(row.count(LIT) for row in self.rows)


class CommitSpec(BaseModel):
    """A single commit to write: timestamp override and message."""

    timestamp: str = Field(min_length=1)
    message: str = Field(min_length=1)


class RunSummary(BaseModel):
    mode: Literal["fill", "pattern"]
    commits: int = 0
    days: int = 0
