from kappa import Node
from kappa.errors import ArityMismatch


def expect_exactly(keyword: str, tail: list[Node], expected: int) -> None:
    if len(tail) != expected:
        raise ArityMismatch(keyword, expected, len(tail))


def expect_at_least(keyword: str, tail: list[Node], minimum: int) -> None:
    if len(tail) < minimum:
        raise ArityMismatch(keyword, minimum, len(tail), at_least=True)
