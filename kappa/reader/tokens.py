from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from kappa.types.literal import Literal

LPAREN_KIND = "lparen"
RPAREN_KIND = "rparen"
IDENTIFIER_KIND = "identifier"
LITERAL_KIND = "literal"


@dataclass(frozen=True)
class Token:
    """A lexical unit: a delimiter, an identifier (value is its text) or a literal."""

    kind: str
    value: Optional[Union[str, Literal]] = None

    def __repr__(self):
        if self.value is None:
            return f"Token({self.kind})"
        return f"Token({self.kind}, {self.value!r})"


LPAREN = Token(LPAREN_KIND)
RPAREN = Token(RPAREN_KIND)


def identifier(text: str) -> Token:
    return Token(IDENTIFIER_KIND, text)


def literal(value: Literal) -> Token:
    return Token(LITERAL_KIND, value)
