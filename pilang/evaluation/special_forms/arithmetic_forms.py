"""Integer arithmetic special forms.

Operands must be numbers. Results wrap to signed 64 bits; `div` truncates
toward zero and `mod` takes the sign of the dividend, as machine integer
division does.
"""

from __future__ import annotations

from typing import Callable

from pilang import EvaluatorFn, PiValue, SExpression
from pilang.errors import PiArithmeticError
from pilang.evaluation.operands import evaluate_number, require_arity
from pilang.types.environment import Environment
from pilang.types.value import Value


def trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def trunc_mod(a: int, b: int) -> int:
    return a - b * trunc_div(a, b)


def _divide(a: int, b: int, line: int) -> int:
    if b == 0:
        raise PiArithmeticError("integer divide by zero", line)
    return trunc_div(a, b)


def _modulo(a: int, b: int, line: int) -> int:
    if b == 0:
        raise PiArithmeticError("integer modulo by zero", line)
    return trunc_mod(a, b)


def _binary_form(name: str, op: Callable[[int, int, int], int]):
    def form(tail: list[SExpression], env: Environment, line: int, evaluate_fn: EvaluatorFn) -> PiValue:
        require_arity(name, tail, 2, f"[{name} a b]", line)
        a = evaluate_number(evaluate_fn, tail[0], env, line, name)
        b = evaluate_number(evaluate_fn, tail[1], env, line, name)
        return Value.of_number(op(a, b, line))

    form.__name__ = f"{name}_form"
    return form


add_form = _binary_form("add", lambda a, b, _: a + b)
sub_form = _binary_form("sub", lambda a, b, _: a - b)
mul_form = _binary_form("mul", lambda a, b, _: a * b)
div_form = _binary_form("div", _divide)
mod_form = _binary_form("mod", _modulo)


def neg_form(tail: list[SExpression], env: Environment, line: int, evaluate_fn: EvaluatorFn) -> PiValue:
    require_arity("neg", tail, 1, "[neg a]", line)
    return Value.of_number(-evaluate_number(evaluate_fn, tail[0], env, line, "neg"))
