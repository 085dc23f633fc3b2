from kappa.analysis.analyzer import analyze
from kappa.analysis.special_forms import SPECIAL_FORMS
