from pilang import EvaluatorFn, PiValue, SExpression
from pilang.evaluation.operands import require_arity, require_identifier
from pilang.modules.loader import import_module
from pilang.types.environment import Environment


def import_form(tail: list[SExpression], env: Environment, line: int, evaluate_fn: EvaluatorFn) -> PiValue:
    """
    Usage:
        [import module_name]

    Runs module_name.pi into the importer's own environment.
    """
    require_arity("import", tail, 1, "[import name]", line)
    name = require_identifier("import", tail[0], line)
    import_module(name.name, env, evaluate_fn)
    return None
