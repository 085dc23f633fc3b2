"""Render literals, node trees, quotations and expressions as kappa source text.

Reading the rendered text back yields an equal value, so the output of the
command line tool can be pasted back into it.
"""

from kappa.types.expression import (
    And,
    Begin,
    Binding,
    Cond,
    If,
    Inconsequential,
    Or,
    Quote,
    Simple,
    Time,
    Unless,
    Variable,
)
from kappa.types.literal import Boolean, Character, Number, String
from kappa.types.nil import NilType
from kappa.types.quotation import Cons
from kappa.types.symbol import Symbol

CHAR_NAMES = {
    "\n": "newline",
    " ": "space",
}

_STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}


def _escape_string(s: str) -> str:
    return '"' + "".join(_STRING_ESCAPES.get(ch, ch) for ch in s) + '"'


def _form(*parts: str) -> str:
    return "(" + " ".join(parts) + ")"


def _cons_source(cell: Cons) -> str:
    parts = []
    rest = cell
    while isinstance(rest, Cons):
        parts.append(to_source(rest.car))
        rest = rest.cdr
    if not isinstance(rest, NilType):
        # Improper tail, never produced by the reader
        parts.extend([".", to_source(rest)])
    return _form(*parts)


def _clause_source(clause) -> str:
    if isinstance(clause, Simple):
        return _form(to_source(clause.test), to_source(clause.consequent))
    if isinstance(clause, Binding):
        return _form(to_source(clause.test), "=>", to_source(clause.receiver))
    if isinstance(clause, Inconsequential):
        return _form(to_source(clause.test))
    raise TypeError(f"Not a cond clause: {clause!r}")


def to_source(obj) -> str:
    # Literals
    if isinstance(obj, Number):
        return str(obj.value)
    if isinstance(obj, Boolean):
        return "#t" if obj.value else "#f"
    if isinstance(obj, Character):
        return "#\\" + CHAR_NAMES.get(obj.value, obj.value)
    if isinstance(obj, String):
        return _escape_string(obj.value)

    # Nodes and quotations
    if isinstance(obj, Symbol):
        return obj.name
    if isinstance(obj, NilType):
        return "()"
    if isinstance(obj, Cons):
        return _cons_source(obj)
    if isinstance(obj, list):
        return _form(*(to_source(x) for x in obj))

    # Expressions
    if isinstance(obj, Variable):
        return obj.name
    if isinstance(obj, Quote):
        return _form("quote", to_source(obj.datum))
    if isinstance(obj, Time):
        return _form("time", to_source(obj.body))
    if isinstance(obj, If):
        return _form("if", to_source(obj.test), to_source(obj.then), to_source(obj.otherwise))
    if isinstance(obj, And):
        return _form("and", *(to_source(x) for x in obj.operands))
    if isinstance(obj, Or):
        return _form("or", *(to_source(x) for x in obj.operands))
    if isinstance(obj, Begin):
        return _form("begin", *(to_source(x) for x in obj.body))
    if isinstance(obj, Unless):
        return _form("unless", to_source(obj.test), to_source(obj.body))
    if isinstance(obj, Cond):
        clauses = [_clause_source(c) for c in obj.clauses]
        return _form("cond", *clauses, _form("else", to_source(obj.else_body)))

    raise TypeError(f"Cannot render {obj!r}")
