"""Program loader: read a source file, parse it and run its top-level forms.

`import` goes through here too, running the module into the importer's
environment, so a module's bindings land in the same namespace.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pilang import EvaluatorFn, PiValue, SExpression
from pilang.config import MODULE_SUFFIX, get_module_roots
from pilang.errors import PiFileError
from pilang.reader.parser import read
from pilang.types.environment import Environment

logger = logging.getLogger(__name__)


def _default_evaluator() -> EvaluatorFn:
    # Lazy import: the evaluator's form table imports this module for `import`.
    from pilang.evaluation.evaluator import evaluate
    return evaluate


def load_file(path: Path | str) -> list[SExpression]:
    """Read and parse a source file into its top-level forms."""
    p = Path(path)
    try:
        code = p.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise PiFileError(f"cannot read {p}: {e}") from e
    logger.debug("loaded %s (%d bytes)", p, len(code))
    return read(code)


def execute_forms(
    forms: list[SExpression], env: Environment, evaluate_fn: Optional[EvaluatorFn] = None
) -> PiValue:
    """Evaluate top-level forms in order; returns the value of the last one.

    Each form's index is its line for error reporting. The first error stops
    the run; bindings made by earlier forms stay in `env`.
    """
    evaluate_fn = evaluate_fn or _default_evaluator()
    result: PiValue = None
    for line, form in enumerate(forms):
        logger.debug("evaluating top-level form %d", line)
        result = evaluate_fn(form, env, line)
    return result


def run_file(path: Path | str, env: Environment, evaluate_fn: Optional[EvaluatorFn] = None) -> Environment:
    forms = load_file(path)
    execute_forms(forms, env, evaluate_fn)
    return env


def resolve_module(name: str) -> Path:
    """Map a module name to `<name>.pi` under the working directory or PILANG_PATH."""
    filename = name + MODULE_SUFFIX
    for root in get_module_roots():
        candidate = root / filename
        if candidate.is_file():
            return candidate
    raise PiFileError(f"cannot find module '{name}' ({filename})")


def import_module(name: str, env: Environment, evaluate_fn: Optional[EvaluatorFn] = None) -> Environment:
    path = resolve_module(name)
    logger.debug("importing %s from %s", name, path)
    return run_file(path, env, evaluate_fn)
