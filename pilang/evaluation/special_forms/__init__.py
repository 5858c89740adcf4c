"""Registry of special forms for the pilang evaluator.

Maps Identifiers to handler functions. Every list is dispatched through this
table by the name at its head; any other head is an unknown command.

Handlers share one signature: (tail, env, line, evaluate_fn) -> Value | None.
"""

from pilang.types.identifier import Identifier
from pilang.evaluation.special_forms.call_form import call_form
from pilang.evaluation.special_forms.set_form import set_form
from pilang.evaluation.special_forms.func_form import func_form
from pilang.evaluation.special_forms.if_form import if_form
from pilang.evaluation.special_forms.import_form import import_form
from pilang.evaluation.special_forms.arithmetic_forms import (
    add_form, sub_form, mul_form, div_form, mod_form, neg_form
)
from pilang.evaluation.special_forms.list_forms import list_form, index_form, range_form, edit_form
from pilang.evaluation.special_forms.output_forms import printchar_form, newline_form, print_form, echo_form

SPECIAL_FORMS = {
    Identifier("call"): call_form,
    Identifier("set"): set_form,
    Identifier("func"): func_form,
    Identifier("add"): add_form,
    Identifier("sub"): sub_form,
    Identifier("mul"): mul_form,
    Identifier("div"): div_form,
    Identifier("mod"): mod_form,
    Identifier("neg"): neg_form,
    Identifier("if"): if_form,
    Identifier("import"): import_form,
    Identifier("list"): list_form,
    Identifier("index"): index_form,
    Identifier("range"): range_form,
    Identifier("edit"): edit_form,
    Identifier("printchar"): printchar_form,
    Identifier("newline"): newline_form,
    Identifier("print"): print_form,
    Identifier("echo"): echo_form,
}
