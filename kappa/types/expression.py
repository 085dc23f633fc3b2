"""Typed expression tree produced by the syntax analyzer.

Literals are their own expressions, so ``Expression`` includes the literal
types directly. There is no application variant: a list whose head is not a
special form never becomes an expression.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from kappa.types.literal import Literal
from kappa.types.quotation import Quotation


@dataclass(frozen=True)
class Variable:
    name: str


@dataclass(frozen=True)
class Quote:
    datum: Quotation


@dataclass(frozen=True)
class Time:
    body: "Expression"


@dataclass(frozen=True)
class If:
    test: "Expression"
    then: "Expression"
    otherwise: "Expression"


@dataclass(frozen=True)
class And:
    operands: Tuple["Expression", ...] = ()


@dataclass(frozen=True)
class Or:
    operands: Tuple["Expression", ...] = ()


@dataclass(frozen=True)
class Begin:
    body: Tuple["Expression", ...]


@dataclass(frozen=True)
class Unless:
    test: "Expression"
    body: "Expression"


# ----------------------
# cond clauses
# ----------------------

@dataclass(frozen=True)
class Simple:
    """(test consequent)"""
    test: "Expression"
    consequent: "Expression"


@dataclass(frozen=True)
class Binding:
    """(test => receiver)"""
    test: "Expression"
    receiver: "Expression"


@dataclass(frozen=True)
class Inconsequential:
    """(test): the value of the test is the result."""
    test: "Expression"


CondClause = Union[Simple, Binding, Inconsequential]


@dataclass(frozen=True)
class Cond:
    clauses: Tuple[CondClause, ...]
    else_body: "Expression"


Expression = Union[
    Literal, Variable, Quote, Time, If, And, Or, Begin, Unless, Cond
]
