"""Draft commit messages from staged changes."""

from __future__ import annotations

import logging
import textwrap
from pathlib import Path

from .analyzer import GitDiffAnalyzer, ParsedDiff
from .config import MAX_BODY_LINE_LENGTH, MAX_SUBJECT_LENGTH
from .exceptions import EmptyInputError, ResourceError
from .git import GitRepo
from .text import split_lines

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = "commit.md"
DEFAULT_DESCRIPTION = "codebase"
MAX_CHANGES_PER_FILE = 3
ELLIPSIS = "..."
CHANGE_BULLET = "  - "


def wrap_body_text(text: str, width: int = MAX_BODY_LINE_LENGTH, prefix: str = "") -> str:
    """Greedily word-wrap text without breaking or hyphenating words.

    Existing line breaks are kept and each line is wrapped on its own.
    Continuation lines keep the indentation of the line they came from,
    plus room for ``prefix`` so bullets stay aligned.

    Args:
        text: Text to wrap
        width: Maximum line width, prefix and indentation included
        prefix: Prepended to the first line only

    Returns:
        The wrapped text
    """
    continuation = " " * len(prefix)
    wrapped: list[str] = []

    for i, line in enumerate(split_lines(text) or [""]):
        content = line.lstrip()
        indent = line[: len(line) - len(content)]
        first_indent = (prefix if i == 0 else continuation) + indent
        if not content:
            wrapped.append(first_indent.rstrip())
            continue
        wrapped.append(
            textwrap.fill(
                content,
                width=width,
                initial_indent=first_indent,
                subsequent_indent=continuation + indent,
                break_long_words=False,
                break_on_hyphens=False,
            )
        )

    return "\n".join(wrapped)


class CommitMessageGenerator:
    """Assemble a commit message from a parsed diff and the policy templates."""

    def __init__(self, analyzer: GitDiffAnalyzer | None = None) -> None:
        self.analyzer = analyzer or GitDiffAnalyzer()

    @property
    def templates(self):
        return self.analyzer.policy.message_template

    def generate_subject_line(self, changes: ParsedDiff) -> str:
        """Build the subject from the inferred verb and the first change.

        Args:
            changes: Parsed staged diff

        Returns:
            Subject line, truncated with an ellipsis past the length limit
        """
        verb = self.analyzer.determine_commit_verb(changes.file_changes)

        first_changes = [lines[0] for lines in changes.file_changes.values() if lines]
        description = first_changes[0].strip().lower() if first_changes else DEFAULT_DESCRIPTION

        subject = f"{verb} {description}"
        if len(subject) > MAX_SUBJECT_LENGTH:
            subject = subject[: MAX_SUBJECT_LENGTH - len(ELLIPSIS)] + ELLIPSIS
        return subject

    def _changes_section(self, changes: ParsedDiff) -> str:
        lines = [self.templates.changes_section, ""]
        for file, file_changes in changes.file_changes.items():
            lines.append(f"* In {file}:")
            for change in file_changes[:MAX_CHANGES_PER_FILE]:
                lines.append(wrap_body_text(change, prefix=CHANGE_BULLET))
        return "\n".join(lines)

    def _breaking_section(self, changes: ParsedDiff) -> str:
        lines = [self.templates.breaking_section, ""]
        lines.extend(wrap_body_text(entry) for entry in changes.breaking_changes)
        return "\n".join(lines)

    def generate_message(self, changes: ParsedDiff) -> str:
        """Assemble the full commit message.

        Sections appear in a fixed order (references, changes overview,
        breaking changes when any were flagged, testing, dependencies)
        and are separated by blank lines.
        """
        subject = self.generate_subject_line(changes)

        sections = [self.templates.references_section, self._changes_section(changes)]
        if changes.breaking_changes:
            sections.append(self._breaking_section(changes))
        sections.append(self.templates.testing_section)
        sections.append(self.templates.dependencies_section)

        return f"{subject}\n\n" + "\n\n".join(sections)

    def generate_for_staged(self, repo: GitRepo | None = None) -> str:
        """Generate a commit message for the staged changes of a repository.

        Raises:
            EmptyInputError: If nothing is staged or no lines were added
        """
        repo = repo or GitRepo()

        diff = repo.get_staged_diff()
        if diff is None or not diff.strip():
            raise EmptyInputError(
                "No staged changes found. Please stage changes with 'git add' first."
            )

        changes = self.analyzer.analyse_diff(diff)
        if not changes.has_changes:
            raise EmptyInputError("No changes detected in diff.")

        return self.generate_message(changes)


def write_commit_message(message: str, path: str | Path = DEFAULT_OUTPUT) -> Path:
    """Write a generated message, replacing any previous file.

    Raises:
        ResourceError: If the file cannot be written
    """
    target = Path(path)
    try:
        target.write_text(message + "\n", encoding="utf-8")
    except OSError as e:
        raise ResourceError(f"Failed to write commit message: {e}") from e
    logger.debug("Wrote commit message to %s", target)
    return target
