# Core type aliases for kappa's data model.
# Node trees use plain Python values: Symbol for identifiers, the literal
# dataclasses for self-evaluating values and Python lists for parenthesised
# forms. The syntax analyzer turns a Node into a typed Expression.
#
# Naming guidance:
# - Node:       Use in reader/parser code for untyped syntactic forms.
# - Expression: Use in analysis code for the typed AST handed to an evaluator.

from typing import Callable, Union

from kappa.types.symbol import Symbol
from kappa.types.literal import Literal
from kappa.types.expression import Expression

__version__ = "0.1.0"

Node = Union[Symbol, Literal, list]

# Analyzer function type: passed to special-form handlers for their operands
AnalyzerFn = Callable[[Node], Expression]
