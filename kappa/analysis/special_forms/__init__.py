"""Registry of special forms for the kappa syntax analyzer.

Maps keyword Symbols to handler functions that validate a form's operands and
build its Expression. The analyzer consults this table for every list whose
head is a symbol; there is no fallback to procedure application.
"""

from kappa.types.symbol import Symbol
from kappa.analysis.special_forms.quote_form import quote_form
from kappa.analysis.special_forms.time_form import time_form
from kappa.analysis.special_forms.if_form import if_form
from kappa.analysis.special_forms.logic_forms import and_form, or_form
from kappa.analysis.special_forms.begin_form import begin_form
from kappa.analysis.special_forms.unless_form import unless_form
from kappa.analysis.special_forms.cond_form import cond_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("time"): time_form,
    Symbol("if"): if_form,
    Symbol("and"): and_form,
    Symbol("or"): or_form,
    Symbol("begin"): begin_form,
    Symbol("unless"): unless_form,
    Symbol("cond"): cond_form,
}
