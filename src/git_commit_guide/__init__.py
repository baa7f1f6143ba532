"""Verify git commit messages and draft them from staged changes."""

__version__ = "1.0.0"

from .analyzer import GitDiffAnalyzer, ParsedDiff
from .config import DEFAULT_POLICY, MessageTemplate, Policy
from .generator import CommitMessageGenerator
from .verifier import CommitMessageVerifier, VerificationResult

__all__ = [
    "CommitMessageGenerator",
    "CommitMessageVerifier",
    "DEFAULT_POLICY",
    "GitDiffAnalyzer",
    "MessageTemplate",
    "ParsedDiff",
    "Policy",
    "VerificationResult",
    "__version__",
]
