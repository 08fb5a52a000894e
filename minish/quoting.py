"""Quote tracking and detection of operators and separators in command lines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

_REDIRECT_CHARS = "<>"


@dataclass
class QuoteState:
    """Counts of single and double quotes seen so far while scanning a line.

    A quote kind is open while its count is odd.
    """

    sgl: int = 0
    dbl: int = 0

    def feed(self, src: str, i: int) -> None:
        """Account for the character at ``src[i]``."""
        char = src[i]
        if char == '"' and self.sgl % 2 == 0:
            self.dbl += 1
        if char == "'" and self.dbl % 2 == 0:
            self.sgl += 1

    def reset(self) -> None:
        """Forget every quote seen so far."""
        self.sgl = 0
        self.dbl = 0

    def is_open(self) -> bool:
        """Return True while inside single or double quotes."""
        return self.sgl % 2 == 1 or self.dbl % 2 == 1


def _char_at(src: str, i: int) -> str:
    return src[i] if 0 <= i < len(src) else ""


def _redirect_length(src: str, i: int) -> int:
    char = _char_at(src, i)
    if char not in _REDIRECT_CHARS or not char:
        return 0
    if _char_at(src, i + 1) == char:
        return 2
    return 1


def all_quote_closed(s: str) -> bool:
    """Return True when every quote opened in ``s`` is closed again."""
    state = QuoteState()
    for i in range(len(s)):
        state.feed(s, i)
    return not state.is_open()


def is_operator(src: str, i: int, quote: Optional[QuoteState]) -> int:
    """Return the length of the redirection operator at ``src[i]``, or 0.

    Operators inside quotes do not count. ``quote`` may be None, meaning
    no quote is open.
    """
    if quote is None:
        quote = QuoteState()
    if quote.is_open():
        return 0
    return _redirect_length(src, i)


def is_redirection(src: str, i: int, quote: QuoteState) -> int:
    """Return the length of the redirection at ``src[i]``, or 0."""
    if quote.is_open():
        return 0
    return _redirect_length(src, i)


def is_separator(src: str, i: int, quote: QuoteState) -> int:
    """Return the length of the token separator at ``src[i]``, or 0.

    Separators are redirections, the pipe and the space, outside quotes.
    """
    if quote.is_open():
        return 0
    length = _redirect_length(src, i)
    if length:
        return length
    if _char_at(src, i) in ("|", " ") and _char_at(src, i):
        return 1
    return 0


def _scan(src: str, detector) -> Iterable[tuple]:
    """Yield (index, length) for every match of ``detector`` in ``src``."""
    state = QuoteState()
    i = 0
    while i < len(src):
        state.feed(src, i)
        length = detector(src, i, state)
        if length > 0:
            yield i, length
            i += length
        else:
            i += 1


def count_operators(src: str) -> int:
    """Return the number of redirection operators in ``src`` outside quotes."""
    if src is None:
        raise TypeError("count_operators() needs a string")
    return sum(1 for _ in _scan(src, is_operator))


def count_operator_tokens(tokens: Iterable[str]) -> int:
    """Return how many tokens start with a redirection operator."""
    return sum(1 for token in tokens if is_operator(token, 0, None) > 0)


def count_redirect_files(tokens: Sequence[str]) -> int:
    """Return how many operator tokens are followed by a non-operator token."""
    return sum(
        1
        for current, following in zip(tokens, tokens[1:])
        if is_operator(current, 0, None) > 0 and not is_operator(following, 0, None)
    )


def operator_char_indexes(src: str) -> List[int]:
    """Return the index of every character belonging to an unquoted operator."""
    indexes: List[int] = []
    for start, length in _scan(src, is_operator):
        indexes.extend(range(start, start + length))
    return indexes


def separator_char_indexes(src: str) -> List[int]:
    """Return the start index of every unquoted separator in ``src``."""
    return [start for start, _ in _scan(src, is_separator)]