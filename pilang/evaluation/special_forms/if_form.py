from pilang import EvaluatorFn, PiValue, SExpression
from pilang.evaluation.operands import evaluate_value, require_arity
from pilang.types.environment import Environment


def if_form(tail: list[SExpression], env: Environment, line: int, evaluate_fn: EvaluatorFn) -> PiValue:
    require_arity("if", tail, 3, "[if cond then else]", line)
    cond = evaluate_value(evaluate_fn, tail[0], env, line, "if")
    # Only a number <= 0 is false; lists and functions count as true.
    if cond.is_number and cond.number <= 0:
        return evaluate_fn(tail[2], env, line)
    return evaluate_fn(tail[1], env, line)
