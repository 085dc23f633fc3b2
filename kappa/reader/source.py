"""Character sources for the lexer."""

from __future__ import annotations

from typing import IO, Iterator


def iter_chars(stream: IO[str], chunk_size: int = 4096) -> Iterator[str]:
    """Yield the characters of a text stream, reading it in chunks.

    Lets CharLexer consume a file lazily instead of loading it whole.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            return
        yield from chunk


def iter_lines(stream: IO[str]) -> Iterator[str]:
    """Yield the lines of a text stream without their line terminators."""
    for line in stream:
        yield line.rstrip("\r\n")
