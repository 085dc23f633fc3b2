from kappa import Node, AnalyzerFn
from kappa.analysis.special_forms.arity import expect_at_least
from kappa.types.expression import Begin


def begin_form(tail: list[Node], analyze_fn: AnalyzerFn) -> Begin:
    expect_at_least("begin", tail, 1)
    return Begin(tuple(analyze_fn(e) for e in tail))
