"""Splitting command lines into words and shell tokens while honouring quotes."""

from __future__ import annotations

from typing import List

from minish.quoting import QuoteState, is_separator


def _segment_count(s: str, c: str) -> int:
    """Return an upper bound on the number of segments ``split_quoted`` yields."""
    state = QuoteState()
    count = 0
    in_word = False
    for ch in s:
        sgl_open = state.sgl % 2 == 1
        dbl_open = state.dbl % 2 == 1
        if ch == "'" and sgl_open and not dbl_open:
            state.sgl += 1
        elif ch == "'" and not sgl_open and not dbl_open and not in_word:
            state.sgl += 1
            count += 1
        elif ch == '"' and not sgl_open and dbl_open:
            state.dbl += 1
        elif ch == '"' and not sgl_open and not dbl_open and not in_word:
            state.dbl += 1
            count += 1
        elif ch == c:
            in_word = False
        elif not sgl_open and not dbl_open and not in_word:
            count += 1
            in_word = True
    return count


def split_quoted(s: str, c: str) -> List[str]:
    """Split ``s`` on ``c`` outside quotes, removing the quote characters.

    A quote of one kind inside quotes of the other kind is kept as text.
    """
    limit = _segment_count(s, c)
    segments: List[str] = []
    state = QuoteState()
    i = 0
    n = len(s)
    while i < n and len(segments) < limit:
        while i < n and s[i] == c and not state.is_open():
            i += 1
        chars: List[str] = []
        while i < n and (state.is_open() or s[i] != c):
            ch = s[i]
            if ch == "'" and state.dbl % 2 == 0:
                state.sgl += 1
            elif ch == '"' and state.sgl % 2 == 0:
                state.dbl += 1
            else:
                chars.append(ch)
            i += 1
        segments.append("".join(chars))
    return segments


def split_tokens(s: str) -> List[str]:
    """Split a command line into words, redirections and pipes.

    Spaces outside quotes separate words and are dropped; ``<``, ``>``,
    ``<<``, ``>>`` and ``|`` outside quotes become tokens of their own.
    Quote characters are kept in the tokens.
    """
    tokens: List[str] = []
    state = QuoteState()
    i = 0
    n = len(s)
    while i < n:
        if s[i] == " " and not state.is_open():
            i += 1
            continue
        state.feed(s, i)
        length = is_separator(s, i, state)
        if length:
            tokens.append(s[i:i + length])
            i += length
            continue
        start = i
        i += 1
        while i < n:
            state.feed(s, i)
            if is_separator(s, i, state):
                break
            i += 1
        tokens.append(s[start:i])
    return tokens