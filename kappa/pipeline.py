"""Lexer -> parser -> analyzer, one top-level form at a time."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Union

from kappa.analysis.analyzer import analyze
from kappa.errors import KappaError, NestingTooDeep, ParseError, SchemeError, UnexpectedEof
from kappa.reader.parser import Parser, parse
from kappa.types.expression import Expression

logger = logging.getLogger(__name__)

Source = Union[str, Iterable[str]]
ExpressionResult = Union[Expression, KappaError]


def read_nodes(source: Source, kind: Optional[str] = None) -> Parser:
    """Stream of node trees (or ParseErrors) for a character source."""
    return parse(source, kind)


def read_expressions(source: Source, kind: Optional[str] = None) -> Iterator[ExpressionResult]:
    """Yield the Expression, or the error that stopped it, for each top-level form.

    A malformed form, or one nested deeper than the analyzer can follow, does
    not end the stream; only a lexer Unmatched error discards the rest of the
    source.
    """
    for node in read_nodes(source, kind):
        if isinstance(node, ParseError):
            yield node
            continue
        try:
            yield analyze(node)
        except SchemeError as err:
            logger.debug("analysis failed: %s", err)
            yield err
        except RecursionError:
            logger.debug("analysis failed: recursion limit reached")
            yield NestingTooDeep()


def read_expression(text: Source, kind: Optional[str] = None) -> Expression:
    """Analyze the first top-level form of ``text``, raising its error if it failed."""
    for result in read_expressions(text, kind):
        if isinstance(result, KappaError):
            raise result
        return result
    raise UnexpectedEof()


class Frontend:
    """
    A streaming front-end for kappa source.
    Feeds each chunk of code through the pipeline and keeps simple counters.
    """

    def __init__(self, kind: Optional[str] = None):
        self.kind = kind
        self.forms = 0
        self.errors = 0

    def feed(self, code: Source) -> list[ExpressionResult]:
        """Read every top-level form in ``code``."""
        results = []
        for result in read_expressions(code, self.kind):
            self.forms += 1
            if isinstance(result, KappaError):
                self.errors += 1
            results.append(result)
        return results
