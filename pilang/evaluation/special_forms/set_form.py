from pilang import EvaluatorFn, PiValue, SExpression
from pilang.evaluation.operands import evaluate_value, require_arity, require_identifier
from pilang.types.environment import Environment


def set_form(tail: list[SExpression], env: Environment, line: int, evaluate_fn: EvaluatorFn) -> PiValue:
    require_arity("set", tail, 2, "[set name expr]", line)
    name = require_identifier("set", tail[0], line)
    value = evaluate_value(evaluate_fn, tail[1], env, line, "set")
    env.define(name, value)
    return None
