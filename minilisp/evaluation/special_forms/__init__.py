"""Registry of special forms for the MiniLisp evaluators.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluators consult these tables before ordinary function application.
"""

from minilisp.types.symbol import Symbol
from minilisp.evaluation.special_forms.quote_forms import quote_form
from minilisp.evaluation.special_forms.if_form import if_form
from minilisp.evaluation.special_forms.defun_form import defun_form

# The pure evaluator knows only quote
PURE_SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
}

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("defun"): defun_form,
}
