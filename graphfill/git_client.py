import logging
import os
import subprocess
from collections.abc import Mapping
from pathlib import Path


logger = logging.getLogger(__name__)


class GitCommandError(Exception):
    """Raised when a git invocation exits with a non-zero status."""

    def __init__(self, args: list[str], returncode: int, stderr: str) -> None:
        self.command = ["git", *args]
        self.returncode = returncode
        self.stderr = stderr.strip()
        detail = f": {self.stderr}" if self.stderr else ""
        super().__init__(
            f"`{' '.join(self.command)}` exited with status {returncode}{detail}"
        )


class GitRepository:
    """Thin wrapper that runs git commands inside one working tree."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def run(self, args: list[str], env: Mapping[str, str] | None = None) -> str:
        full_env = os.environ.copy()
        if env:
            full_env.update(env)

        try:
            completed = subprocess.run(
                ["git", *args],
                cwd=self.path,
                env=full_env,
                check=True,
                capture_output=True,
                text=True,
            )
        except subprocess.CalledProcessError as exc:
            raise GitCommandError(args, exc.returncode, exc.stderr or "") from exc

        return completed.stdout

    def is_repo(self) -> bool:
        if not self.path.is_dir():
            return False
        try:
            output = self.run(["rev-parse", "--is-inside-work-tree"])
        except GitCommandError:
            return False
        return output.strip() == "true"

    def init(self) -> None:
        self.run(["init"])

    def ensure_repo(self) -> bool:
        """Initialise the working tree when needed; return True if it was created."""

        self.path.mkdir(parents=True, exist_ok=True)
        if self.is_repo():
            return False

        logger.info("Initialising a new git repository in %s", self.path)
        self.init()
        return True

    def add(self, relative_path: str) -> None:
        self.run(["add", "--", relative_path])

    def commit(self, message: str, timestamp: str) -> None:
        """Commit staged changes with author and committer dates both set."""

        self.run(
            ["commit", "--quiet", "-m", message, f"--date={timestamp}"],
            env={
                "GIT_AUTHOR_DATE": timestamp,
                "GIT_COMMITTER_DATE": timestamp,
            },
        )
