import pytest
from hypothesis import HealthCheck, given, settings, strategies as st

from kappa.debug_utils.pprint import to_source
from kappa.pipeline import read_expression
from kappa.types import (
    And, Begin, Binding, Boolean, Character, Cond, Cons, If, Inconsequential,
    Nil, Number, Or, Quote, Simple, String, Symbol, Time, Unless, Variable,
)
from kappa.types.quotation import from_sequence


@pytest.mark.parametrize(
    "source,expected",
    [
        ("12", "12"),
        ("#T", "#t"),
        ("#\\NEWLINE", "#\\newline"),
        ("#\\ ", "#\\space"),
        ("#\\x", "#\\x"),
        ('"a\\nb\\t\\"c\\\\"', '"a\\nb\\t\\"c\\\\"'),
        ('"line\\r\\n"', '"line\\r\\n"'),
        ("[if 1 2 3]", "(if 1 2 3)"),
        ("(quote (a b))", "(quote (a b))"),
        ("(quote)", "(quote ())"),
        ("(and)", "(and)"),
        ("(or a  b)", "(or a b)"),
        ("(begin (time x))", "(begin (time x))"),
        ("(unless a b)", "(unless a b)"),
        ("(cond (a) (b => f) (c d) (else e))", "(cond (a) (b => f) (c d) (else e))"),
    ]
)
def test_to_source(source, expected):
    assert to_source(read_expression(source)) == expected


def test_to_source_nodes_and_quotations():
    assert to_source([Symbol("a"), [], Number(1)]) == "(a () 1)"
    assert to_source(Nil) == "()"
    assert to_source(Cons(Symbol("a"), Symbol("b"))) == "(a . b)"


def test_to_source_rejects_unknown():
    with pytest.raises(TypeError):
        to_source(object())


# -------------------------------
# Strategies
# -------------------------------
name_strat = st.from_regex(r"[a-z][a-z0-9\-]{0,8}", fullmatch=True)

literal_strat = st.one_of(
    st.integers(min_value=0, max_value=2 ** 31 - 1).map(Number),
    st.booleans().map(Boolean),
    st.characters().map(Character),
    st.text(max_size=10).map(String),
)

quotation_strat = st.recursive(
    st.one_of(literal_strat, name_strat.map(Symbol), st.just(Nil)),
    lambda children: st.lists(children, max_size=4).map(from_sequence),
    max_leaves=10,
)

clause_strat = lambda e: st.one_of(  # noqa: E731
    st.builds(Simple, e, e),
    st.builds(Binding, e, e),
    st.builds(Inconsequential, e),
)

expression_strat = st.recursive(
    st.one_of(literal_strat, name_strat.map(Variable), quotation_strat.map(Quote)),
    lambda e: st.one_of(
        st.builds(Time, e),
        st.builds(If, e, e, e),
        st.lists(e, max_size=3).map(lambda xs: And(tuple(xs))),
        st.lists(e, max_size=3).map(lambda xs: Or(tuple(xs))),
        st.lists(e, min_size=1, max_size=3).map(lambda xs: Begin(tuple(xs))),
        st.builds(Unless, e, e),
        st.builds(
            lambda cs, body: Cond(tuple(cs), body),
            st.lists(clause_strat(e), max_size=3),
            e,
        ),
    ),
    max_leaves=20,
)


@settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
@given(expression_strat)
def test_rendered_source_reads_back(expression):
    assert read_expression(to_source(expression)) == expression
