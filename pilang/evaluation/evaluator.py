"""Core evaluator for pilang.

A direct recursive tree walk. Atoms evaluate to themselves (integers) or to
their binding (identifiers); a list is dispatched on the name at its head
through the SPECIAL_FORMS table. There is no user-level application other
than the `call` form.
"""

from __future__ import annotations

from pilang import SExpression, PiValue
from pilang.errors import PiUnknownCommand
from pilang.evaluation.special_forms import SPECIAL_FORMS
from pilang.types.environment import Environment
from pilang.types.identifier import Identifier
from pilang.types.value import Value


def evaluate(expr: SExpression, env: Environment, line: int = 0) -> PiValue:
    """
    Evaluate one form against the shared environment.

    `line` is the index of the enclosing top-level form and is only used to
    annotate errors. Returns a Value, or None for forms that yield nothing.
    """
    match expr:
        case Identifier():
            return env.lookup(expr, line)

        case int():
            return Value.of_number(expr)

        case [Identifier() as head, *tail] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail, env, line, evaluate)

        case [Identifier() as head, *_]:
            raise PiUnknownCommand(head.name, line)

        case list():
            # Empty list, or a head that is not a name
            raise PiUnknownCommand("", line)

    raise TypeError(f"cannot evaluate {expr!r}")
