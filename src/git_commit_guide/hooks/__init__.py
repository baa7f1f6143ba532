"""Git hook installation for commit message verification."""

from __future__ import annotations

import shutil
import stat
import sys
import time
from pathlib import Path

from rich.console import Console

from ..exceptions import ResourceError
from ..git import GitRepo
from .templates import HOOK_MARKER, get_commit_msg_hook

HOOK_NAME = "commit-msg"


def install_hook(repo: GitRepo | None = None, console: Console | None = None) -> Path:
    """Install the commit-msg verification hook.

    An existing hook that was not written by this tool is backed up first.

    Args:
        repo: Repository to install into (defaults to the current directory)
        console: Rich console for output (creates new one if None)

    Returns:
        Path to the installed hook

    Raises:
        GitError: If the target is not a git repository
        ResourceError: If the hook cannot be written
    """
    if console is None:
        console = Console()
    repo = repo or GitRepo()
    repo.check_repository()

    is_windows = sys.platform == "win32"

    hooks_dir = repo.get_hooks_dir()
    target_path = hooks_dir / HOOK_NAME
    existed_before = target_path.exists()

    try:
        hooks_dir.mkdir(parents=True, exist_ok=True)

        if existed_before:
            existing_content = target_path.read_text(encoding="utf-8", errors="ignore")
            if HOOK_MARKER not in existing_content:
                backup_path = target_path.with_name(f"{HOOK_NAME}.backup-{int(time.time())}")
                shutil.copy2(target_path, backup_path)
                console.print(
                    f"[yellow]⚠ {HOOK_NAME} - backed up existing to {backup_path.name}[/]"
                )

        target_path.write_text(get_commit_msg_hook(is_windows), encoding="utf-8")

        # Make executable on Unix
        if not is_windows:
            target_path.chmod(target_path.stat().st_mode | stat.S_IEXEC)
    except OSError as e:
        console.print(f"[red]✗ {HOOK_NAME} - installation failed: {e}[/]")
        raise ResourceError(f"Failed to install {HOOK_NAME} hook: {e}") from e

    if existed_before:
        console.print(f"[green]✓ {HOOK_NAME} - updated[/]")
    else:
        console.print(f"[green]✓ {HOOK_NAME} - installed[/]")

    return target_path


__all__ = [
    "HOOK_NAME",
    "install_hook",
    "get_commit_msg_hook",
]
