"""Errors reported to the user by the command line tool."""

from __future__ import annotations


class CommitGuideError(Exception):
    """Base class for errors that end the current invocation."""

    pass


class PolicyViolationError(CommitGuideError):
    """A commit message broke one or more policy rules."""

    def __init__(self, violations: list[str]) -> None:
        super().__init__("Commit message validation failed")
        self.violations = list(violations)


class ResourceError(CommitGuideError):
    """A file or external tool could not be used."""

    pass


class EmptyInputError(CommitGuideError):
    """There is nothing to generate a commit message from."""

    pass
