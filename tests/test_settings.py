from datetime import date

import pytest
from pydantic import ValidationError

from graphfill.settings import Settings


def test_settings_defaults() -> None:
    settings = Settings()

    assert settings.start_date == date(2025, 1, 1)
    assert settings.end_date == date(2025, 12, 31)
    assert settings.min_commits_per_day == 0
    assert settings.max_commits_per_day == 3
    assert settings.activity_file == "activity.txt"
    assert settings.commit_message == "Activity update #{n} on {date}"
    assert settings.pattern_start_date == date(2025, 1, 5)
    assert settings.pattern_commits == 3
    assert settings.strict_pattern_alignment is False
    assert settings.log_level == "INFO"


def test_settings_keyword_values_build_models() -> None:
    settings = Settings(
        start_date="2025-03-01", end_date="2025-03-31", max_commits_per_day=5
    )

    assert settings.date_range().start == date(2025, 3, 1)
    assert settings.date_range().end == date(2025, 3, 31)
    assert settings.density().max_commits == 5


def test_settings_ignore_environment_and_dotenv(
    monkeypatch: pytest.MonkeyPatch, tmp_path
) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("MAX_COMMITS_PER_DAY=9\n", encoding="utf-8")
    monkeypatch.setenv("MAX_COMMITS_PER_DAY", "7")
    monkeypatch.setenv("GRAPHFILL_MAX_COMMITS_PER_DAY", "5")
    monkeypatch.setenv("START_DATE", "2030-01-01")

    settings = Settings()

    assert settings.max_commits_per_day == 3
    assert settings.start_date == date(2025, 1, 1)


def test_settings_rejects_unknown_option() -> None:
    with pytest.raises(ValidationError):
        Settings(max_commit_per_day=5)


def test_settings_rejects_start_after_end() -> None:
    with pytest.raises(ValidationError, match="start_date"):
        Settings(start_date=date(2025, 2, 1), end_date=date(2025, 1, 1))


def test_settings_rejects_min_above_max() -> None:
    with pytest.raises(ValidationError, match="min_commits_per_day"):
        Settings(min_commits_per_day=4, max_commits_per_day=2)


def test_settings_rejects_negative_counts() -> None:
    with pytest.raises(ValidationError):
        Settings(pattern_commits=-1)


def test_settings_rejects_unknown_message_placeholder() -> None:
    with pytest.raises(ValidationError, match="unknown placeholders"):
        Settings(commit_message="update {n} {branch}")


@pytest.mark.parametrize(
    "template",
    ["update {}", "update on {date:d}", "update #{n!z}", "update #{n[0]}"],
)
def test_settings_rejects_message_that_cannot_render(template: str) -> None:
    with pytest.raises(ValidationError, match="cannot be rendered"):
        Settings(commit_message=template)


def test_settings_accepts_escaped_braces() -> None:
    settings = Settings(commit_message="{{bot}} update #{n} on {date}")

    assert settings.commit_message == "{{bot}} update #{n} on {date}"


def test_settings_normalizes_log_level() -> None:
    assert Settings(log_level="debug").log_level == "DEBUG"


def test_settings_rejects_unknown_log_level() -> None:
    with pytest.raises(ValidationError, match="log_level"):
        Settings(log_level="verbose")
