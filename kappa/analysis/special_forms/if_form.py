from kappa import Node, AnalyzerFn
from kappa.analysis.special_forms.arity import expect_exactly
from kappa.types.expression import If


def if_form(tail: list[Node], analyze_fn: AnalyzerFn) -> If:
    # No one-armed if: the else branch is required
    expect_exactly("if", tail, 3)
    test, then, otherwise = tail
    return If(analyze_fn(test), analyze_fn(then), analyze_fn(otherwise))
