"""Shape and kind checks shared by the special forms."""

from __future__ import annotations

from pilang import EvaluatorFn, SExpression
from pilang.errors import PiFormError, PiTypeMismatch
from pilang.types.environment import Environment
from pilang.types.identifier import Identifier
from pilang.types.value import Value, ValueKind


def require_arity(command: str, tail: list[SExpression], count: int, usage: str, line: int) -> None:
    if len(tail) != count:
        raise PiFormError(
            f"{command} requires exactly {count} argument{'s' if count != 1 else ''}: {usage}", line
        )


def require_identifier(command: str, form: SExpression, line: int) -> Identifier:
    if not isinstance(form, Identifier):
        raise PiFormError(f"{command} expects a name, got {form!r}", line)
    return form


def evaluate_value(
    evaluate_fn: EvaluatorFn, form: SExpression, env: Environment, line: int, command: str
) -> Value:
    """Evaluate `form`, insisting that it produces a value."""
    value = evaluate_fn(form, env, line)
    if value is None:
        raise PiTypeMismatch(f"{command}: expression yields no value", line)
    return value


def evaluate_kind(
    evaluate_fn: EvaluatorFn,
    form: SExpression,
    env: Environment,
    line: int,
    command: str,
    kind: ValueKind,
) -> Value:
    value = evaluate_value(evaluate_fn, form, env, line, command)
    if value.kind is not kind:
        raise PiTypeMismatch(f"{command}: expected {kind.value}, got {value.kind.value}", line)
    return value


def evaluate_number(
    evaluate_fn: EvaluatorFn, form: SExpression, env: Environment, line: int, command: str
) -> int:
    return evaluate_kind(evaluate_fn, form, env, line, command, ValueKind.NUMBER).number


def evaluate_list(
    evaluate_fn: EvaluatorFn, form: SExpression, env: Environment, line: int, command: str
) -> Value:
    return evaluate_kind(evaluate_fn, form, env, line, command, ValueKind.LIST)
