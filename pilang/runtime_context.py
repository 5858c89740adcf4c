from __future__ import annotations
import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

# NOTE: process-global. If threading is introduced, switch to contextvars.
_current_output: Optional[TextIO] = None


def get_output() -> TextIO:
    # Resolve sys.stdout lazily so redirections (pytest capsys etc.) are honoured.
    return _current_output if _current_output is not None else sys.stdout


@contextmanager
def redirect_output(stream: Optional[TextIO]) -> Iterator[None]:
    """Temporarily send program output to `stream` (no-op when None)."""
    global _current_output
    if stream is None:
        yield
        return
    previous = _current_output
    _current_output = stream
    try:
        yield
    finally:
        _current_output = previous
