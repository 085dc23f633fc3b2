"""Quoted (unevaluated) data: literals, symbols and cons chains ending in Nil."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

from kappa.types.literal import Literal
from kappa.types.nil import Nil, NilType
from kappa.types.symbol import Symbol


@dataclass(frozen=True)
class Cons:
    car: "Quotation"
    cdr: "Quotation"

    def __iter__(self) -> Iterator["Quotation"]:
        """Iterate the elements of a proper list. Stops at the first non-pair cdr."""
        cell: Quotation = self
        while isinstance(cell, Cons):
            yield cell.car
            cell = cell.cdr


Quotation = Union[Literal, Symbol, NilType, Cons]


def from_sequence(items) -> Quotation:
    """Build a proper list (right-nested cons chain ending in Nil) from quotations."""
    result: Quotation = Nil
    for item in reversed(list(items)):
        result = Cons(item, result)
    return result
