from pilang import EvaluatorFn, PiValue, SExpression
from pilang.errors import PiFormError
from pilang.evaluation.operands import require_arity, require_identifier
from pilang.types.environment import Environment
from pilang.types.function import Function
from pilang.types.value import Value


def func_form(tail: list[SExpression], env: Environment, line: int, evaluate_fn: EvaluatorFn) -> PiValue:
    """
    Usage:
        [func [p1 p2 ...] body]

    The function records only its parameter names and body; the current
    bindings are not captured.
    """
    require_arity("func", tail, 2, "[func [params...] body]", line)
    params, body = tail
    if not isinstance(params, list):
        raise PiFormError(f"func parameters must be a list, got {params!r}", line)
    names = [require_identifier("func", p, line) for p in params]
    return Value.of_function(Function(names, body))
