from pathlib import Path
from typing import Protocol

from graphfill.models import CommitSpec


class CommitTarget(Protocol):
    path: Path

    def add(self, relative_path: str) -> None: ...

    def commit(self, message: str, timestamp: str) -> None: ...


def activity_line(spec: CommitSpec) -> str:
    return f"{spec.message}  |  {spec.timestamp}\n"


def make_commit(repo: CommitTarget, activity_file: str, spec: CommitSpec) -> None:
    """Append to the activity file, stage it and commit it at `spec.timestamp`.

    Git failures propagate to the caller; nothing is retried.
    """

    file_path = repo.path / activity_file
    with open(file_path, "a", encoding="utf-8", newline="\n") as handle:
        handle.write(activity_line(spec))

    repo.add(activity_file)
    repo.commit(spec.message, spec.timestamp)
