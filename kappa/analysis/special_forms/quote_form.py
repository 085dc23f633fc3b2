from typing import Iterator

from kappa import Node, AnalyzerFn
from kappa.types.literal import is_literal
from kappa.types.quotation import Quotation, from_sequence
from kappa.types.expression import Quote
from kappa.types.symbol import Symbol


def quotation_of(node: Node) -> Quotation:
    """Convert a node tree into quoted data.

    Symbols and literals are kept as they are; a list becomes a cons chain
    ending in Nil, which is where a parsed list turns into pair structure.
    Nested lists are walked with an explicit stack, so any depth the parser
    accepts can be quoted.
    """
    if not isinstance(node, list):
        return _atom(node)

    # Each entry: (remaining items of an open list, quotations built so far)
    stack: list[tuple[Iterator[Node], list[Quotation]]] = [(iter(node), [])]
    while True:
        items, built = stack[-1]
        for item in items:
            if isinstance(item, list):
                stack.append((iter(item), []))
                break
            built.append(_atom(item))
        else:
            stack.pop()
            completed = from_sequence(built)
            if not stack:
                return completed
            stack[-1][1].append(completed)


def _atom(node: Node) -> Quotation:
    if isinstance(node, Symbol) or is_literal(node):
        return node
    raise TypeError(f"Cannot quote {node!r}")


def quote_form(tail: list[Node], analyze_fn: AnalyzerFn) -> Quote:
    # (quote x) quotes x. Any other length quotes the operands as a list,
    # so (quote) is Nil and (quote a b) is (a b).
    if len(tail) == 1:
        return Quote(quotation_of(tail[0]))
    return Quote(quotation_of(tail))
