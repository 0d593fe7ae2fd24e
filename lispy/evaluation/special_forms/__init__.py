"""Registry of special forms for the lispy evaluator.

Maps keyword names to handler functions that implement non-standard
evaluation rules. The evaluator consults this table, keyed purely on the
head symbol's text, before ordinary application.
"""

from lispy.evaluation.special_forms.if_form import if_form
from lispy.evaluation.special_forms.define_form import define_form
from lispy.evaluation.special_forms.let_form import let_form
from lispy.evaluation.special_forms.lambda_form import lambda_form
from lispy.evaluation.special_forms.begin_form import begin_form
from lispy.evaluation.special_forms.when_form import when_form
from lispy.evaluation.special_forms.while_form import while_form
from lispy.evaluation.special_forms.set_form import set_form
from lispy.evaluation.special_forms.quote_form import quote_form

SPECIAL_FORMS = {
    "if": if_form,
    "define": define_form,
    "let": let_form,
    "lambda": lambda_form,
    "begin": begin_form,
    "when": when_form,
    "while": while_form,
    "set!": set_form,
    "quote": quote_form,
}
