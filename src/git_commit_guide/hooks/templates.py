"""Git hook templates for commit message verification."""

HOOK_MARKER = "git-commit-guide"


def get_commit_msg_hook(is_windows: bool) -> str:
    """Get commit-msg hook content.

    Args:
        is_windows: Whether to generate Windows batch script

    Returns:
        Hook script content
    """
    if is_windows:
        return f"""@echo off
REM {HOOK_MARKER} commit-msg hook
REM Reject commit messages that do not follow the commit message policy

python -m git_commit_guide --file "%1"
if errorlevel 1 exit /b 1
"""
    else:
        return f"""#!/bin/sh
# {HOOK_MARKER} commit-msg hook
# Reject commit messages that do not follow the commit message policy

COMMIT_MSG_FILE=$1

python -m git_commit_guide --file "$COMMIT_MSG_FILE" || exit 1
"""
