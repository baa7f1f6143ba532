"""Commit message style verification."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .config import DEFAULT_POLICY, MAX_BODY_LINE_LENGTH, MAX_SUBJECT_LENGTH, Policy
from .text import split_lines

logger = logging.getLogger(__name__)


@dataclass
class VerificationResult:
    """Outcome of checking a commit message.

    ``has_errors`` is True when at least one rule failed.
    """

    has_errors: bool
    violations: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.has_errors


class CommitMessageVerifier:
    """Check commit messages against a policy."""

    def __init__(self, policy: Policy | None = None) -> None:
        self.policy = policy or DEFAULT_POLICY

    def verify_message(self, message: str) -> VerificationResult:
        """Check a commit message against the policy.

        All subject rules are checked, so a single call reports every
        problem at once.

        Args:
            message: The full commit message

        Returns:
            VerificationResult listing violations in rule order
        """
        lines = split_lines(message)
        if not lines:
            return VerificationResult(True, ["Empty commit message"])

        violations: list[str] = []
        subject = lines[0]

        if len(subject) > MAX_SUBJECT_LENGTH:
            violations.append(f"Subject line exceeds {MAX_SUBJECT_LENGTH} characters")

        words = subject.split()
        first_word = words[0] if words else ""
        if first_word not in self.policy.standard_verbs:
            violations.append(
                "Subject must start with standard verb: "
                + ", ".join(self.policy.standard_verbs)
            )

        if subject.endswith("."):
            violations.append("Subject line ends with a full stop")

        if not subject[:1].isupper():
            violations.append("Subject line not capitalised")

        if len(lines) > 1 and lines[1]:
            violations.append("No blank line between subject and body")

        for number, line in enumerate(lines[2:], start=3):
            if line and len(line) > MAX_BODY_LINE_LENGTH:
                violations.append(f"Line {number} exceeds {MAX_BODY_LINE_LENGTH} characters")

        return VerificationResult(bool(violations), violations)

    def verify_file(self, path: str | Path) -> VerificationResult:
        """Check a commit message stored in a file.

        Args:
            path: File holding the message

        Returns:
            VerificationResult; an unreadable file yields a single violation
        """
        try:
            message = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Could not read %s: %s", path, e)
            return VerificationResult(True, [f"Failed to read file: {e}"])
        return self.verify_message(message)
