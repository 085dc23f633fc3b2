"""Special form: cond.

    (cond <clause> ... (else <expression>))

The last clause is always the else clause and must be exactly
``(else <expression>)``. Every earlier clause takes one of three shapes:

- ``(test)``                -> Inconsequential: the test value is the result
- ``(test consequent)``     -> Simple
- ``(test => receiver)``    -> Binding: the receiver gets the test value

An ``else``-headed clause before the last one is not special; its test is
the variable ``else``.
"""

from kappa import Node, AnalyzerFn
from kappa.analysis.special_forms.arity import expect_at_least
from kappa.errors import MalformedCondClause
from kappa.types.expression import (
    Binding,
    Cond,
    CondClause,
    Expression,
    Inconsequential,
    Simple,
)
from kappa.types.symbol import Symbol

ELSE = Symbol("else")
ARROW = Symbol("=>")


def _else_body(clause: Node, analyze_fn: AnalyzerFn) -> Expression:
    if not (isinstance(clause, list) and len(clause) == 2 and clause[0] == ELSE):
        raise MalformedCondClause("cond: last clause must be (else <expression>)")
    return analyze_fn(clause[1])


def _clause(clause: Node, analyze_fn: AnalyzerFn) -> CondClause:
    if not isinstance(clause, list):
        raise MalformedCondClause("cond: clause must be a list")
    if len(clause) == 1:
        return Inconsequential(analyze_fn(clause[0]))
    if len(clause) == 2:
        test, consequent = clause
        return Simple(analyze_fn(test), analyze_fn(consequent))
    if len(clause) == 3:
        test, arrow, receiver = clause
        if arrow != ARROW:
            raise MalformedCondClause("cond: three-element clause must be (test => receiver)")
        return Binding(analyze_fn(test), analyze_fn(receiver))
    raise MalformedCondClause(f"cond: clause must have 1 to 3 elements, got {len(clause)}")


def cond_form(tail: list[Node], analyze_fn: AnalyzerFn) -> Cond:
    expect_at_least("cond", tail, 1)
    *clauses, last = tail
    else_body = _else_body(last, analyze_fn)
    return Cond(tuple(_clause(c, analyze_fn) for c in clauses), else_body)
