from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


MODULE_SUFFIX = '.pi'

_DEFAULT_RECURSION_LIMIT = 10000


def paths_from_env(var: str, defaults: Iterable[Path] = ()) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_module_roots() -> List[Path]:
    # The working directory always wins; PILANG_PATH only adds fallbacks.
    return [Path.cwd(), *paths_from_env('PILANG_PATH')]


def get_recursion_limit() -> int:
    raw = os.environ.get('PILANG_RECURSION_LIMIT')
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    try:
        return max(int(raw), 100)
    except ValueError:
        return _DEFAULT_RECURSION_LIMIT
