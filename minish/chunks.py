"""Command chunks: the pieces a command line is cut into before execution."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Sequence

from minish.quoting import QuoteState


class ChunkType(Enum):
    """Kind of a chunk."""

    CMD = 0
    OPERATOR = 1


@dataclass
class Chunk:
    """One part of a command line, with its tokens and redirections."""

    tokens: List[str] = field(default_factory=list)
    argv: List[str] = field(default_factory=list)
    chunk_type: ChunkType = ChunkType.CMD
    has_redir: bool = False
    redir_count: int = 0
    redir_file_count: int = 0
    redir: List[str] = field(default_factory=list)
    redir_files: List[str] = field(default_factory=list)
    input_redir: List[str] = field(default_factory=list)
    input_redir_file: List[str] = field(default_factory=list)
    index: int = 0
    length: int = 0
    quotes: QuoteState = field(default_factory=QuoteState)


def create_chunk(
    tokens: Sequence[str],
    chunk_type: ChunkType = ChunkType.CMD,
    index: int = 0,
    quotes: Optional[QuoteState] = None,
) -> Chunk:
    """Build a chunk from its tokens.

    An operator chunk records the length of its first token.
    """
    token_list = list(tokens)
    length = 0
    if chunk_type is ChunkType.OPERATOR:
        if not token_list:
            raise ValueError("an operator chunk needs at least one token")
        length = len(token_list[0])
    return Chunk(
        tokens=token_list,
        chunk_type=chunk_type,
        index=index,
        length=length,
        quotes=quotes if quotes is not None else QuoteState(),
    )


def describe_chunks(chunks: Iterable[Optional[Chunk]]) -> str:
    """Return one line per chunk listing its tokens in backticks."""
    lines = []
    present = (chunk for chunk in chunks if chunk is not None)
    for number, chunk in enumerate(present):
        listed = "".join(f"`{token}`;" for token in chunk.tokens)
        lines.append(f"chunk {number} = {listed}\n")
    return "".join(lines)


def _dump_table(name: str, items: Sequence[str]) -> List[str]:
    lines = [f"    chunk.{name}:\n"]
    lines.extend(f'      [{i}]: "{item}"\n' for i, item in enumerate(items))
    lines.append(f"      [{len(items)}]: NULL (end of table)\n")
    return lines


def dump_chunks(chunks: Sequence[Optional[Chunk]]) -> str:
    """Return a detailed multi-line report of every chunk."""
    lines = ["\n--- Start of cmd_list ---\n"]
    if not chunks:
        lines.append("The cmd_list is empty.\n")
    for index, chunk in enumerate(chunks):
        lines.append(f"Node [{index}]:\n")
        if chunk is None:
            lines.append("  content: NULL\n")
            continue
        lines.append("  content (chunk):\n")
        if not chunk.tokens:
            lines.append("    chunk.tokens: NULL\n")
        else:
            lines.extend(_dump_table("tokens", chunk.tokens))
            lines.extend(_dump_table("argv", chunk.argv))
            lines.extend(_dump_table("redir", chunk.redir))
            lines.extend(_dump_table("redir_files", chunk.redir_files))
        lines.append(f"    chunk.type: {chunk.chunk_type.name}\n")
        lines.append(f"    chunk.has_redir: {'true' if chunk.has_redir else 'false'}\n")
        lines.append(f"    chunk.redir_count: {chunk.redir_count}\n")
        lines.append(f"    chunk.redir_file_count: {chunk.redir_file_count}\n")
    lines.append("--- End of cmd_list ---\n\n")
    return "".join(lines)