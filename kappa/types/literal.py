"""Self-evaluating literal values shared by tokens, nodes, quotations and expressions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from kappa.errors import InvalidLiteral

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


@dataclass(frozen=True)
class Number:
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidLiteral(repr(self.value), "not an integer")
        if not INT32_MIN <= self.value <= INT32_MAX:
            raise InvalidLiteral(str(self.value), "out of 32-bit signed range")


@dataclass(frozen=True)
class Boolean:
    value: bool


@dataclass(frozen=True)
class Character:
    value: str

    def __post_init__(self):
        if len(self.value) != 1:
            raise InvalidLiteral(self.value, "a character holds exactly one code point")


@dataclass(frozen=True)
class String:
    value: str


Literal = Union[Number, Boolean, Character, String]
LITERAL_TYPES = (Number, Boolean, Character, String)


def is_literal(value: object) -> bool:
    return isinstance(value, LITERAL_TYPES)
