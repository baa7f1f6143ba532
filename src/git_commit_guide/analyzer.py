"""Staged diff analysis: added lines, breaking changes and verb inference."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .config import DEFAULT_POLICY, DEFAULT_VERB, Policy
from .text import split_lines

logger = logging.getLogger(__name__)

DIFF_HEADER = "diff --git"
ADDED_LINE = "+"
NEW_FILE_HEADER = "+++"
PATH_PREFIX = "b/"

# Matched as plain substrings, so "changelog" counts as a "change".
BREAKING_CHANGE_INDICATORS = (
    "remove",
    "delete",
    "deprecate",
    "break",
    "change",
    "rename",
    "refactor",
    "drop",
    "migrate",
)


@dataclass
class ParsedDiff:
    """Added lines per file plus the lines flagged as breaking changes."""

    file_changes: dict[str, list[str]] = field(default_factory=dict)
    breaking_changes: list[str] = field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        return bool(self.file_changes)


def is_breaking_change(change: str) -> bool:
    """Check whether an added line looks like an incompatible change."""
    change_lower = change.lower()
    return any(word in change_lower for word in BREAKING_CHANGE_INDICATORS)


def format_breaking_change(file: str, change: str) -> str:
    return f"* Breaking change in {file}:\n  {change}"


class GitDiffAnalyzer:
    """Classify the added lines of a unified diff."""

    def __init__(self, policy: Policy | None = None) -> None:
        self.policy = policy or DEFAULT_POLICY

    def analyse_diff(self, diff_output: str) -> ParsedDiff:
        """Collect the added lines of each file in a unified diff.

        Args:
            diff_output: Raw output of ``git diff --cached``

        Returns:
            ParsedDiff with files in the order they appear in the diff
        """
        parsed = ParsedDiff()
        current_file: str | None = None

        for line in split_lines(diff_output):
            if line.startswith(DIFF_HEADER):
                tokens = line.split()
                current_file = tokens[-1].removeprefix(PATH_PREFIX) if tokens else None
            elif line.startswith(ADDED_LINE) and not line.startswith(NEW_FILE_HEADER):
                if current_file is None:
                    continue
                change = line[len(ADDED_LINE):].strip()
                if not change:
                    continue
                parsed.file_changes.setdefault(current_file, []).append(change)
                if is_breaking_change(change):
                    parsed.breaking_changes.append(format_breaking_change(current_file, change))

        logger.debug(
            "Parsed %d file(s), %d breaking change(s)",
            len(parsed.file_changes),
            len(parsed.breaking_changes),
        )
        return parsed

    def determine_commit_verb(self, file_changes: dict[str, list[str]]) -> str:
        """Pick the commit verb suggested by the added lines.

        Args:
            file_changes: Added lines per file

        Returns:
            The canonical verb of the first matching indicator category
        """
        all_changes = " ".join(
            change.lower() for changes in file_changes.values() for change in changes
        )

        for category, keywords in self.policy.indicators.items():
            if any(keyword in all_changes for keyword in keywords):
                verb = self.policy.verb_mapping.get(category, DEFAULT_VERB)
                logger.debug("Matched indicator category %r -> %s", category, verb)
                return verb

        return DEFAULT_VERB
