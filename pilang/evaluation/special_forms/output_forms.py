"""Forms that write to the program's output stream."""

from __future__ import annotations

from pilang import EvaluatorFn, PiValue, SExpression
from pilang.errors import PiTypeMismatch
from pilang.evaluation.operands import evaluate_list, evaluate_number, evaluate_value, require_arity
from pilang.printer import codepoint_to_char, render
from pilang.runtime_context import get_output
from pilang.types.environment import Environment


def printchar_form(tail: list[SExpression], env: Environment, line: int, evaluate_fn: EvaluatorFn) -> PiValue:
    require_arity("printchar", tail, 1, "[printchar cp]", line)
    cp = evaluate_number(evaluate_fn, tail[0], env, line, "printchar")
    get_output().write(codepoint_to_char(cp))
    return None


def newline_form(tail: list[SExpression], env: Environment, line: int, evaluate_fn: EvaluatorFn) -> PiValue:
    require_arity("newline", tail, 0, "[newline]", line)
    get_output().write("\n")
    return None


def print_form(tail: list[SExpression], env: Environment, line: int, evaluate_fn: EvaluatorFn) -> PiValue:
    """
    Usage:
        [print lst]

    Writes each element of a list of character codes, with no separators.
    """
    require_arity("print", tail, 1, "[print lst]", line)
    lst = evaluate_list(evaluate_fn, tail[0], env, line, "print")
    chars = []
    for item in lst.elements:
        if not item.is_number:
            raise PiTypeMismatch(f"print: expected a list of numbers, found {item.kind.value}", line)
        chars.append(codepoint_to_char(item.number))
    get_output().write("".join(chars))
    return None


def echo_form(tail: list[SExpression], env: Environment, line: int, evaluate_fn: EvaluatorFn) -> PiValue:
    require_arity("echo", tail, 1, "[echo expr]", line)
    value = evaluate_value(evaluate_fn, tail[0], env, line, "echo")
    get_output().write(render(value, line) + "\n")
    return None
