"""Git operations wrapper using subprocess."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


class GitError(Exception):
    """Error during git operations."""

    pass


class GitRepo:
    """Wrapper for the few git commands the tool needs."""

    def __init__(self, path: str | Path | None = None) -> None:
        """Initialize git repository wrapper.

        Args:
            path: Path to the repository (defaults to current directory)
        """
        self.path = Path(path) if path else Path.cwd()

    def _run(self, *args: str) -> subprocess.CompletedProcess[str]:
        """Run a git command.

        Output is decoded strictly as UTF-8.

        Args:
            *args: Git command arguments

        Returns:
            CompletedProcess result

        Raises:
            GitError: If git is missing, exits non-zero or emits non-UTF-8 output
        """
        cmd = ["git", *args]
        logger.debug("Running %s", " ".join(cmd))
        try:
            return subprocess.run(
                cmd,
                cwd=self.path,
                check=True,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="strict",
            )
        except subprocess.CalledProcessError as e:
            raise GitError(
                f"Command failed: {' '.join(cmd)}\nExit code: {e.returncode}\nStderr: {e.stderr}"
            ) from e
        except FileNotFoundError as e:
            raise GitError("git executable not found") from e
        except UnicodeDecodeError as e:
            raise GitError(f"Command produced non UTF-8 output: {' '.join(cmd)}") from e

    def is_repository(self) -> bool:
        """Check if this is a valid git repository."""
        try:
            self._run("rev-parse", "--git-dir")
            return True
        except GitError:
            return False

    def check_repository(self) -> None:
        """Check if this is a valid git repository.

        Raises:
            GitError: If not a git repository
        """
        if not self.is_repository():
            raise GitError("Not a git repository!")

    def get_hooks_dir(self) -> Path:
        """Get the hooks directory of the repository."""
        result = self._run("rev-parse", "--git-path", "hooks")
        hooks_dir = Path(result.stdout.strip())
        if not hooks_dir.is_absolute():
            hooks_dir = self.path / hooks_dir
        return hooks_dir

    def get_staged_diff(self) -> str | None:
        """Get diff of staged changes.

        Returns:
            The diff text, or None if git could not produce it
        """
        try:
            result = self._run("diff", "--cached")
        except GitError as e:
            logger.debug("Could not read staged diff: %s", e)
            return None
        return result.stdout
