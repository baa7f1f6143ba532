"""Line handling shared by the verifier, analyzer and generator."""

from __future__ import annotations


def split_lines(text: str) -> list[str]:
    """Split text on ``\\n`` only, the way git and commit messages do.

    A ``\\r`` before a ``\\n`` is dropped, and a trailing newline does not
    produce a final empty line. Other characters that ``str.splitlines``
    treats as breaks (form feeds, U+2028, ...) stay inside their line.
    """
    lines = text.split("\n")
    last = lines.pop()
    lines = [line.removesuffix("\r") for line in lines]
    if last:
        lines.append(last)
    return lines
