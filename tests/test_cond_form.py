import pytest

from helpers import expr
from kappa.errors import ArityMismatch, MalformedCondClause, SchemeError
from kappa.types import (
    Binding, Cond, Inconsequential, Number, Quote, Simple, Symbol, Variable,
)


def test_simple_clause_with_else():
    assert expr("(cond (1 2) (else 3))") == Cond((Simple(Number(1), Number(2)),), Number(3))


def test_all_clause_shapes():
    assert expr("(cond (a) (b => f) (c d) (else e))") == Cond(
        (
            Inconsequential(Variable("a")),
            Binding(Variable("b"), Variable("f")),
            Simple(Variable("c"), Variable("d")),
        ),
        Variable("e"),
    )


def test_clauses_keep_their_order():
    result = expr("(cond (1 10) (2 20) (3 30) (else 0))")
    assert [c.test for c in result.clauses] == [Number(1), Number(2), Number(3)]


def test_else_only():
    # One clause serves as the else clause and there are no ordinary clauses
    assert expr("(cond (else 1))") == Cond((), Number(1))


def test_missing_else_fails():
    with pytest.raises(MalformedCondClause):
        expr("(cond (1 2))")


def test_else_not_last_is_an_ordinary_clause():
    assert expr("(cond (else 1) (else 2))") == Cond(
        (Simple(Variable("else"), Number(1)),), Number(2)
    )


@pytest.mark.parametrize(
    "source",
    [
        "(cond (else))",
        "(cond (else 1 2))",
        "(cond (ELSE 1))",
        "(cond else)",
        "(cond (1 2) 3)",
        "(cond (1 2) ())",
    ]
)
def test_malformed_else_clause(source):
    with pytest.raises(MalformedCondClause):
        expr(source)


@pytest.mark.parametrize(
    "source",
    [
        "(cond () (else 1))",
        "(cond x (else 1))",
        "(cond (a b c) (else 1))",
        "(cond (a b c d) (else 1))",
        "(cond (a => b c) (else 1))",
    ]
)
def test_malformed_ordinary_clause(source):
    with pytest.raises(MalformedCondClause):
        expr(source)


def test_empty_cond_is_arity_error():
    with pytest.raises(ArityMismatch):
        expr("(cond)")


def test_clause_bodies_are_analyzed():
    assert expr("(cond ((quote a)) (else (quote b)))") == Cond(
        (Inconsequential(Quote(Symbol("a"))),), Quote(Symbol("b"))
    )
    with pytest.raises(SchemeError):
        expr("(cond ((if 1)) (else 1))")
