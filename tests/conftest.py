import shutil
from pathlib import Path

import pytest

from graphfill.git_client import GitRepository


requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


class RecordingRepository:
    """Stands in for GitRepository and records what would be committed."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.added: list[str] = []
        self.commits: list[tuple[str, str]] = []

    def add(self, relative_path: str) -> None:
        self.added.append(relative_path)

    def commit(self, message: str, timestamp: str) -> None:
        self.commits.append((message, timestamp))


@pytest.fixture
def recording_repo(tmp_path: Path) -> RecordingRepository:
    return RecordingRepository(tmp_path)


@pytest.fixture
def git_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Isolate git from the user's configuration and give it an identity."""

    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(tmp_path / "gitconfig"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Graph Fill")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "graphfill@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Graph Fill")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "graphfill@example.com")


@pytest.fixture
def git_repo(git_env: None, tmp_path: Path) -> GitRepository:
    repo = GitRepository(tmp_path / "repo")
    repo.ensure_repo()
    return repo


def commit_dates(repo: GitRepository) -> list[tuple[str, str]]:
    """Return (author date, committer date) pairs, oldest commit first."""

    output = repo.run(
        [
            "log",
            "--reverse",
            "--format=%ad|%cd",
            "--date=format:%Y-%m-%d %H:%M:%S",
        ]
    )
    pairs = []
    for line in output.splitlines():
        author_date, committer_date = line.split("|")
        pairs.append((author_date, committer_date))
    return pairs


def commit_count(repo: GitRepository) -> int:
    if not (repo.path / ".git").exists():
        return 0
    output = repo.run(["rev-list", "--all", "--count"])
    return int(output.strip())
