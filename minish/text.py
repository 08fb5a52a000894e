"""Small string helpers used across the shell."""

from __future__ import annotations

import re
import sys
from typing import List, Optional, Sequence, TextIO

_WHITESPACE = " \t\n"
_RUN = re.compile(r"([ \t\n])[ \t\n]+")


def trim(src: str) -> str:
    """Strip surrounding whitespace and collapse inner whitespace runs.

    Each inner run keeps only its first character.
    """
    return _RUN.sub(r"\1", src.strip(_WHITESPACE))


def count_useless_spaces(src: str) -> int:
    """Return how many whitespace characters ``trim`` removes from ``src``."""
    return len(src) - len(trim(src))


def join_with(s1: str, s2: str, sep: str) -> str:
    """Join two strings with ``sep`` between them."""
    return f"{s1}{sep}{s2}"


def substring(s: str, start: int, length: int) -> Optional[str]:
    """Return up to ``length`` characters of ``s`` from ``start``.

    Returns None when ``length`` is not positive or ``start`` is past the end.
    """
    if length <= 0 or start >= len(s):
        return None
    return s[start:start + length]


def join3(s1: str, s2: str, s3: str) -> str:
    """Concatenate three strings."""
    return f"{s1}{s2}{s3}"


def slice_tokens(tokens: Sequence[str], start: int, end: int) -> List[str]:
    """Return a copy of ``tokens[start]`` through ``tokens[end]``, both included."""
    if start < 0 or end >= len(tokens):
        raise IndexError("token range out of bounds")
    return list(tokens[start:end + 1])


def error_message(msg: str, stream: Optional[TextIO] = None) -> None:
    """Write ``msg`` and a newline to ``stream`` (standard error by default)."""
    target = stream if stream is not None else sys.stderr
    target.write(msg + "\n")