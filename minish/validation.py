"""Syntax checks on a command line that has been cut into chunks."""

from __future__ import annotations

from typing import Optional, Sequence

from minish.chunks import Chunk
from minish.quoting import is_operator


class ShellSyntaxError(ValueError):
    """Raised when a command line has an unexpected token."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"bash: syntax error near unexpected token `{token}'")


def _first_char(token: str) -> str:
    return token[:1]


def _starts_with_operator(token: str) -> bool:
    return is_operator(token, 0, None) > 0


def _unexpected_token(chunks: Sequence[Optional[Chunk]], position: int) -> str:
    if position + 1 >= len(chunks):
        return "newline"
    following = chunks[position + 1]
    if following is not None and following.tokens:
        return following.tokens[0]
    return "undefined"


def check_simple(chunks: Sequence[Optional[Chunk]]) -> bool:
    """Reject a chunk made of a lone redirection operator.

    The error names the first token of the next chunk, or ``newline``.
    Checking stops at the first missing chunk.
    """
    for position, chunk in enumerate(chunks):
        if chunk is None:
            break
        tokens = chunk.tokens
        if tokens and _starts_with_operator(tokens[0]) and len(tokens) == 1:
            raise ShellSyntaxError(_unexpected_token(chunks, position))
    return True


def _check_tokens(chunk: Optional[Chunk]) -> None:
    if chunk is None:
        return
    after_operator = False
    previous = ""
    for token in chunk.tokens:
        head = _first_char(token)
        if not after_operator and (_starts_with_operator(token) or head == "|"):
            previous = token
            after_operator = True
            continue
        # "<>" is accepted, as bash does
        if after_operator and previous[:1] == "<" and head == ">":
            after_operator = False
        if after_operator and head in ("<", ">"):
            raise ShellSyntaxError(head)
        after_operator = False


def check_triple(chunks: Sequence[Optional[Chunk]]) -> bool:
    """Reject a redirection or pipe directly followed by a redirection."""
    for chunk in chunks:
        _check_tokens(chunk)
    return True


def check_redir_pipe(chunks: Sequence[Optional[Chunk]]) -> bool:
    """Reject a pipe that directly follows a chunk ending in a redirection."""
    ends_with_operator = False
    for chunk in chunks:
        tokens = chunk.tokens if chunk is not None else []
        if ends_with_operator and tokens and _first_char(tokens[0]) == "|":
            raise ShellSyntaxError("|")
        ends_with_operator = bool(tokens) and _starts_with_operator(tokens[-1])
    return True


def check_user_input(chunks: Sequence[Optional[Chunk]]) -> bool:
    """Run every syntax check in turn; raise on the first error."""
    check_simple(chunks)
    check_triple(chunks)
    check_redir_pipe(chunks)
    return True