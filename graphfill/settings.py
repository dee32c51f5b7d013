from datetime import date
from string import Formatter
from typing import Literal

from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator
from pydantic_settings import BaseSettings
from pydantic_settings import PydanticBaseSettingsSource
from pydantic_settings import SettingsConfigDict

from graphfill.models import DateRange
from graphfill.models import DensityConfig


ALLOWED_MESSAGE_FIELDS = {"n", "date"}

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Run settings for both commit modes.

    Values come only from the defaults below and keyword arguments given
    at construction; the environment and `.env` files are not consulted.
    """

    start_date: date = date(2025, 1, 1)
    end_date: date = date(2025, 12, 31)
    min_commits_per_day: int = Field(default=0, ge=0)
    max_commits_per_day: int = Field(default=3, ge=0)
    activity_file: str = "activity.txt"
    commit_message: str = "Activity update #{n} on {date}"
    pattern_start_date: date = date(2025, 1, 5)
    pattern_commits: int = Field(default=3, ge=0)
    strict_pattern_alignment: bool = False

    log_level: LogLevel = "INFO"
    sentry_dsn: str | None = None
    environment: str = "development"
    release: str | None = None

    model_config = SettingsConfigDict(extra="forbid")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings,)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("activity_file")
    @classmethod
    def activity_file_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("activity_file cannot be empty")
        return value.strip()

    @field_validator("commit_message")
    @classmethod
    def commit_message_fields_known(cls, value: str) -> str:
        fields = {
            name.split(".")[0].split("[")[0]
            for _, name, _, _ in Formatter().parse(value)
            if name
        }
        unknown = fields - ALLOWED_MESSAGE_FIELDS
        if unknown:
            raise ValueError(
                f"unknown placeholders in commit_message: {', '.join(sorted(unknown))}"
            )

        try:
            value.format(n=1, date="2025-01-01")
        except (AttributeError, IndexError, KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"commit_message cannot be rendered: {exc}") from exc
        return value

    @model_validator(mode="after")
    def check_ranges(self) -> "Settings":
        if self.start_date > self.end_date:
            raise ValueError("start_date must be before or equal to end_date")
        if self.min_commits_per_day > self.max_commits_per_day:
            raise ValueError(
                "min_commits_per_day must be less than or equal to max_commits_per_day"
            )
        return self

    def date_range(self) -> DateRange:
        return DateRange(start=self.start_date, end=self.end_date)

    def density(self) -> DensityConfig:
        return DensityConfig(
            min_commits=self.min_commits_per_day,
            max_commits=self.max_commits_per_day,
        )
