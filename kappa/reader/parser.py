"""
  Structural parser: tokens -> node trees

- Streaming, lazy: yields one item per balanced top-level form.
- Emits plain Python values, no typed wrappers:

    - identifiers -> Symbol
    - literals    -> Number / Boolean / Character / String
    - lists       -> Python list (empty list for "()")

- Uses an explicit stack of open lists instead of recursion, so nesting depth
  is not bounded by the Python call stack.
- Errors are yielded as ParseError instances. After an error the next form is
  read with a fresh stack.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Union

from kappa import Node
from kappa.errors import (
    LexError,
    LexFailure,
    ParseError,
    UnexpectedEof,
    UnmatchedRightParen,
)
from kappa.reader.lexer import LexResult, make_lexer
from kappa.reader.tokens import (
    Token,
    LPAREN_KIND,
    RPAREN_KIND,
    IDENTIFIER_KIND,
    LITERAL_KIND,
)
from kappa.types.symbol import Symbol

logger = logging.getLogger(__name__)

ParseResult = Union[Node, ParseError]


def _atom(tok: Token) -> Node:
    if tok.kind == IDENTIFIER_KIND:
        return Symbol(tok.value)
    return tok.value


class Parser:
    """Iterator of node trees (or ParseErrors) over a token source."""

    def __init__(self, tokens: Iterable[LexResult]):
        self.tokens: Iterator[LexResult] = iter(tokens)
        self.exhausted = False

    def __iter__(self) -> Parser:
        return self

    def __next__(self) -> ParseResult:
        if self.exhausted:
            raise StopIteration
        result = self.parse_next()
        if result is None:
            self.exhausted = True
            raise StopIteration
        if isinstance(result, ParseError):
            logger.debug("parse error: %s", result)
        return result

    def parse_next(self) -> Optional[ParseResult]:
        """Read one top-level form. Returns None when tokens run out between forms."""
        stack: list[list[Node]] = []
        for tok in self.tokens:
            if isinstance(tok, LexError):
                return LexFailure(tok)

            if tok.kind == LPAREN_KIND:
                stack.append([])
            elif tok.kind == RPAREN_KIND:
                if not stack:
                    return UnmatchedRightParen()
                completed = stack.pop()
                if not stack:
                    return completed
                stack[-1].append(completed)
            elif tok.kind in (IDENTIFIER_KIND, LITERAL_KIND):
                node = _atom(tok)
                if not stack:
                    return node
                stack[-1].append(node)
            else:
                raise ValueError(f"Unknown token: {tok!r}")

        if stack:
            return UnexpectedEof()
        return None


def parse(source: Union[str, Iterable[str]], kind: Optional[str] = None) -> Parser:
    """Lex and parse a character source into a stream of node trees."""
    return Parser(make_lexer(source, kind))
