from kappa import Node, AnalyzerFn
from kappa.analysis.special_forms.arity import expect_exactly
from kappa.types.expression import Time


def time_form(tail: list[Node], analyze_fn: AnalyzerFn) -> Time:
    expect_exactly("time", tail, 1)
    return Time(analyze_fn(tail[0]))
