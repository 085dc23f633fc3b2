from kappa.types.nil import Nil, NilType
from kappa.types.symbol import Symbol
from kappa.types.literal import Number, Boolean, Character, String, Literal, is_literal
from kappa.types.quotation import Cons, Quotation
from kappa.types.expression import (
    Variable, Quote, Time, If, And, Or, Begin, Unless, Cond,
    Simple, Binding, Inconsequential, CondClause, Expression,
)
