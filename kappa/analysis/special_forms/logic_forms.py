from kappa import Node, AnalyzerFn
from kappa.types.expression import And, Or


def and_form(tail: list[Node], analyze_fn: AnalyzerFn) -> And:
    """(and a b c ...) with zero or more operands, analyzed left-to-right."""
    return And(tuple(analyze_fn(e) for e in tail))


def or_form(tail: list[Node], analyze_fn: AnalyzerFn) -> Or:
    """(or a b c ...) with zero or more operands, analyzed left-to-right."""
    return Or(tuple(analyze_fn(e) for e in tail))
