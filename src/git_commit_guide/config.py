"""Built-in commit message policy."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

DEFAULT_VERB = "Add"

MAX_SUBJECT_LENGTH = 50
MAX_BODY_LINE_LENGTH = 72

STANDARD_VERBS: dict[str, str] = {
    "Add": "Create a capability, e.g. feature, test, dependency",
    "Cut": "Remove a capability, e.g. feature, test, dependency",
    "Fix": "Fix an issue, e.g. bug, typo, error, misstatement",
    "Bump": "Increase the version of something, e.g. a dependency",
    "Make": "Change the build process, tools, or infrastructure",
    "Start": "Begin doing something, e.g. enable a feature flag",
    "Stop": "End doing something, e.g. disable a feature flag",
    "Refactor": "Change code without changing its behaviour",
    "Reformat": "Change the layout of code, e.g. whitespace, linting",
    "Optimize": "Change code to improve performance",
    "Document": "Change documentation only, e.g. help file, comments",
    "Merge": "Merge one branch into another",
}

# Order matters: the first category with a matching keyword wins.
INDICATORS: dict[str, tuple[str, ...]] = {
    "fix": ("fix", "bug", "issue"),
    "cut": ("remove", "delete", "drop"),
    "bump": ("bump", "upgrade", "version"),
    "refactor": ("refactor", "rename", "restructure"),
    "optimize": ("optimize", "optimise", "performance", "speed up"),
    "document": ("readme", "docstring", "documentation"),
    "reformat": ("reformat", "indent", "whitespace", "lint"),
    "start": ("enable", "start"),
    "stop": ("disable", "stop"),
    "make": ("makefile", "dockerfile", "build"),
}

VERB_MAPPING: dict[str, str] = {
    "fix": "Fix",
    "cut": "Cut",
    "bump": "Bump",
    "refactor": "Refactor",
    "optimize": "Optimize",
    "document": "Document",
    "reformat": "Reformat",
    "start": "Start",
    "stop": "Stop",
    "make": "Make",
}

COMMIT_INSTRUCTIONS = """
To utilise this commit message:

1. Review the generated commit.md file
2. Complete any sections marked with [Required]
3. Update any sections marked with [Optional]
4. Use it directly with git commit:
   git commit -F commit.md

Or copy specific sections into your commit:
   cat commit.md | git commit -F -
"""


@dataclass(frozen=True)
class MessageTemplate:
    """Fixed text fragments used to assemble a commit message body."""

    references_section: str = (
        "# References [Required]\n"
        "# Link to related tickets, docs, or discussions\n"
        "Closes #\n"
        "Relates to #\n"
        "See also: "
    )
    testing_section: str = (
        "# Testing Instructions [Optional]\n"
        "# Describe how to test these changes\n"
        "1. Steps to test\n"
        "2. Expected outcomes\n"
        "3. Edge cases to verify"
    )
    dependencies_section: str = (
        "# Dependencies [Optional]\n"
        "# List any prerequisite changes or dependencies\n"
        "- [ ] Database migrations\n"
        "- [ ] Configuration updates\n"
        "- [ ] External service changes"
    )
    changes_section: str = (
        "# Changes Overview [Required]\n# Briefly describe the purpose of these changes"
    )
    breaking_section: str = (
        "# Breaking Changes [Required if any]\n"
        "# List any backward-incompatible changes and migration steps"
    )


def _frozen(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class Policy:
    """Accepted verbs, verb inference rules and message templates.

    Mappings are wrapped read-only so a policy cannot change once built.
    Iteration follows insertion order, which makes verb selection and the
    verb list in violation messages reproducible.
    """

    standard_verbs: Mapping[str, str] = field(default_factory=lambda: STANDARD_VERBS)
    indicators: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: INDICATORS)
    verb_mapping: Mapping[str, str] = field(default_factory=lambda: VERB_MAPPING)
    message_template: MessageTemplate = field(default_factory=MessageTemplate)

    def __post_init__(self) -> None:
        object.__setattr__(self, "standard_verbs", _frozen(self.standard_verbs))
        object.__setattr__(
            self,
            "indicators",
            _frozen({k: tuple(v) for k, v in self.indicators.items()}),
        )
        object.__setattr__(self, "verb_mapping", _frozen(self.verb_mapping))


DEFAULT_POLICY = Policy()
