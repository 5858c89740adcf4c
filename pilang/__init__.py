# Core type aliases for the pilang data model.
# Forms (code) are plain Python data: int for integer literals, Identifier for names,
# and list for bracketed lists. Runtime values are pilang.types.value.Value records.
#
# Naming guidance:
# - SExpression: use in reader/parser code to denote syntactic forms.
# - PiValue: use in evaluator/runtime code to denote evaluated values (None means "no value").

from typing import Any, Callable, Optional

__version__ = "0.1.0"

SExpression = Any
PiValue = Optional[Any]

# Evaluator function type passed into special forms: (form, env, line) -> value
EvaluatorFn = Callable[..., PiValue]
