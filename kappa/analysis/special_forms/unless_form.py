from kappa import Node, AnalyzerFn
from kappa.analysis.special_forms.arity import expect_exactly
from kappa.types.expression import Unless


def unless_form(tail: list[Node], analyze_fn: AnalyzerFn) -> Unless:
    expect_exactly("unless", tail, 2)
    test, body = tail
    return Unless(analyze_fn(test), analyze_fn(body))
