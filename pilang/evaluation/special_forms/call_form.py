from pilang import EvaluatorFn, PiValue, SExpression
from pilang.errors import PiFormError, PiNotAFunction
from pilang.evaluation.apply import apply_function
from pilang.reader.parser import unparse
from pilang.types.environment import Environment


def call_form(tail: list[SExpression], env: Environment, line: int, evaluate_fn: EvaluatorFn) -> PiValue:
    """
    Usage:
        [call f a1 a2 ...]
    """
    if not tail:
        raise PiFormError("call requires a function: [call f args...]", line)
    target, *arg_forms = tail
    callee = evaluate_fn(target, env, line)
    if callee is None or not callee.is_function:
        raise PiNotAFunction(f"not a function: {unparse(target)}", line)
    return apply_function(callee.function, arg_forms, env, line, evaluate_fn)
