from __future__ import annotations

from pathlib import Path
from typing import Optional, TextIO

from pilang import PiValue
from pilang.evaluation.evaluator import evaluate
from pilang.modules.loader import execute_forms, run_file
from pilang.reader.parser import read
from pilang.runtime_context import redirect_output
from pilang.types.environment import Environment


class Interpreter:
    """
    Runs pilang source against one Environment that persists across calls.
    Program output goes to `output` (the live sys.stdout when not given).
    """

    def __init__(self, output: Optional[TextIO] = None):
        self.env: Environment = Environment()
        self.output = output

    def eval(self, code: str) -> PiValue:
        """Run source text; returns the value of the last top-level form, if any."""
        forms = read(code)
        with redirect_output(self.output):
            return execute_forms(forms, self.env, evaluate)

    def run_file(self, path: Path | str) -> Environment:
        with redirect_output(self.output):
            return run_file(path, self.env, evaluate)
