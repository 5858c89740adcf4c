"""Function application for pilang.

`call` is the only way to run a Function. Arguments are evaluated left to
right and each one is bound into the shared environment as soon as it is
computed; the body then runs in that same environment. Nothing is restored
when the body finishes.
"""

from __future__ import annotations

from pilang import EvaluatorFn, PiValue, SExpression
from pilang.errors import PiFormError
from pilang.evaluation.operands import evaluate_value
from pilang.types.environment import Environment
from pilang.types.function import Function


def apply_function(
    fn: Function,
    arg_forms: list[SExpression],
    env: Environment,
    line: int,
    evaluate_fn: EvaluatorFn,
) -> PiValue:
    """Bind `arg_forms` to the parameters of `fn` and evaluate its body.

    Surplus arguments are ignored and never evaluated.
    """
    if len(arg_forms) < len(fn.params):
        raise PiFormError(
            f"call expects {len(fn.params)} arguments for {fn}, got {len(arg_forms)}", line
        )
    args = (evaluate_value(evaluate_fn, form, env, line, "call") for form in arg_forms)
    fn.bind_arguments(args, env)
    return evaluate_fn(fn.body, env, line)
