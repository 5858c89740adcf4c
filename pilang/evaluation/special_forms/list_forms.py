"""List construction, access and in-place mutation.

`index` returns the storage slot itself and `range` returns a window onto the
same storage, so `edit` through any alias is visible through every other.
"""

from __future__ import annotations

from pilang import EvaluatorFn, PiValue, SExpression
from pilang.errors import PiTypeMismatch
from pilang.evaluation.operands import (
    evaluate_list,
    evaluate_number,
    evaluate_value,
    require_arity,
    require_identifier,
)
from pilang.types.environment import Environment
from pilang.types.value import Value


def list_form(tail: list[SExpression], env: Environment, line: int, evaluate_fn: EvaluatorFn) -> PiValue:
    items = [evaluate_value(evaluate_fn, form, env, line, "list") for form in tail]
    return Value.of_list(items)


def index_form(tail: list[SExpression], env: Environment, line: int, evaluate_fn: EvaluatorFn) -> PiValue:
    require_arity("index", tail, 2, "[index lst i]", line)
    lst = evaluate_list(evaluate_fn, tail[0], env, line, "index")
    i = evaluate_number(evaluate_fn, tail[1], env, line, "index")
    return lst.elements.slot(i, line)


def range_form(tail: list[SExpression], env: Environment, line: int, evaluate_fn: EvaluatorFn) -> PiValue:
    """
    Usage:
        [range lst i j]

    Elements [i, j), or [i, end) when j is 0.
    """
    require_arity("range", tail, 3, "[range lst i j]", line)
    lst = evaluate_list(evaluate_fn, tail[0], env, line, "range")
    lo = evaluate_number(evaluate_fn, tail[1], env, line, "range")
    hi = evaluate_number(evaluate_fn, tail[2], env, line, "range")
    return Value.of_view(lst.elements.window(lo, None if hi == 0 else hi, line))


def edit_form(tail: list[SExpression], env: Environment, line: int, evaluate_fn: EvaluatorFn) -> PiValue:
    """
    Usage:
        [edit name i val]

    `name` is looked up directly rather than evaluated, after `i` and `val`.
    """
    require_arity("edit", tail, 3, "[edit name i val]", line)
    name = require_identifier("edit", tail[0], line)
    i = evaluate_number(evaluate_fn, tail[1], env, line, "edit")
    val = evaluate_value(evaluate_fn, tail[2], env, line, "edit")
    target = env.lookup(name, line)
    if not target.is_list:
        raise PiTypeMismatch(f"edit: {name} is not a list", line)
    target.elements.slot(i, line).assign(val)
    return target
