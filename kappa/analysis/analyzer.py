from __future__ import annotations

import logging

from kappa import Node
from kappa.analysis.special_forms import SPECIAL_FORMS
from kappa.errors import (
    ApplicationNotImplemented,
    UnexpectedNil,
    UnhandledKeyword,
)
from kappa.types.expression import Expression, Variable
from kappa.types.literal import is_literal
from kappa.types.symbol import Symbol

logger = logging.getLogger(__name__)


def analyze(node: Node) -> Expression:
    """Turn one node tree into a typed Expression.

    Raises a SchemeError subclass when the tree is not a valid expression.
    The node is only read, so analyzing it again gives an equal result.
    """
    if is_literal(node):
        return node

    # TODO: reject special-form keywords used as variables once reserved words are settled
    if isinstance(node, Symbol):
        return Variable(node.name)

    if isinstance(node, list):
        if not node:
            raise UnexpectedNil()
        head, *tail = node
        if not isinstance(head, Symbol):
            # Literal or computed operator: that would be an application
            raise ApplicationNotImplemented()
        handler = SPECIAL_FORMS.get(head)
        if handler is None:
            raise UnhandledKeyword(head.name)
        logger.debug("special form %s with %d operands", head, len(tail))
        return handler(tail, analyze)

    raise TypeError(f"Not a node: {node!r}")
