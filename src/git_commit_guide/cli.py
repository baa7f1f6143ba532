"""CLI interface for git-commit-guide."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console

from . import __version__
from .config import COMMIT_INSTRUCTIONS
from .exceptions import CommitGuideError, PolicyViolationError
from .generator import DEFAULT_OUTPUT, CommitMessageGenerator, write_commit_message
from .git import GitError
from .hooks import install_hook
from .log import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR, setup_logging
from .verifier import CommitMessageVerifier, VerificationResult

logger = logging.getLogger(__name__)


def check_result(result: VerificationResult) -> None:
    """Raise if a verification found problems.

    Raises:
        PolicyViolationError: If the result has errors
    """
    if result.has_errors:
        raise PolicyViolationError(result.violations)
    logger.info("Commit message is valid")


def generate(output: Path) -> str:
    """Generate a message for the staged changes and write it to ``output``."""
    message = CommitMessageGenerator().generate_for_staged()
    write_commit_message(message, output)

    logger.info("=== Generated Commit Message ===")
    click.echo(message)
    logger.info("================================")
    logger.info(COMMIT_INSTRUCTIONS)
    return message


@click.command()
@click.option(
    "-m",
    "--message",
    "message_string",
    help="Verify if a commit message follows standards",
)
@click.option(
    "-f",
    "--file",
    "message_file",
    type=click.Path(path_type=Path),
    help="Verify if a commit message file follows standards",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(path_type=Path),
    default=DEFAULT_OUTPUT,
    show_default=True,
    help="File the generated commit message is written to",
)
@click.option(
    "--install-hook",
    is_flag=True,
    help="Install a commit-msg hook that verifies every commit message",
)
@click.option(
    "--log-level",
    envvar=LOG_LEVEL_ENV_VAR,
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    help=f"Logging level (also read from {LOG_LEVEL_ENV_VAR})",
)
@click.version_option(__version__)
def main(
    message_string: str | None,
    message_file: Path | None,
    output: Path,
    install_hook: bool,
    log_level: str,
) -> None:
    """Verify commit messages, or draft one from the staged changes.

    \b
    Examples:
      # Verify a message
      git-commit-guide -m "Fix crash on empty config"

      # Verify a message file (e.g. from a commit-msg hook)
      git-commit-guide -f .git/COMMIT_EDITMSG

      # Draft commit.md from staged changes
      git add -p && git-commit-guide

      # Verify every commit automatically
      git-commit-guide --install-hook
    """
    setup_logging(log_level)

    try:
        if install_hook:
            install_hook_func(console=Console(stderr=True))
            return

        if message_string is not None:
            check_result(CommitMessageVerifier().verify_message(message_string))
            return

        if message_file is not None:
            check_result(CommitMessageVerifier().verify_file(message_file))
            return

        generate(output)

    except PolicyViolationError as e:
        logger.error("Commit message validation failed:")
        for violation in e.violations:
            logger.error("- %s", violation)
        sys.exit(1)
    except (CommitGuideError, GitError) as e:
        logger.error("%s", e)
        sys.exit(1)


# Alias for install_hook to avoid name collision with the flag
install_hook_func = install_hook


__all__ = ["main", "check_result", "generate"]
