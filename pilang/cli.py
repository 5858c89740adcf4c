"""
Command line entry point.

Usage:
    pilang program.pi
    pilang -v program.pi          # debug logging on stderr
    pilang --strict program.pi    # exit status 1 when the program fails
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from pilang import __version__
from pilang.config import get_recursion_limit
from pilang.errors import PiError
from pilang.interpreter import Interpreter

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pilang", description="Run a pilang program.")
    parser.add_argument("file", help="path to the .pi source file to run")
    parser.add_argument("-v", "--verbose", action="store_true", help="log loader and evaluator activity to stderr")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="exit with status 1 when the program fails (errors are otherwise reported with status 0)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    limit = get_recursion_limit()
    if limit > sys.getrecursionlimit():
        sys.setrecursionlimit(limit)

    interp = Interpreter()
    try:
        interp.run_file(args.file)
    except PiError as e:
        logger.debug("run of %s failed", args.file, exc_info=True)
        print("Error", e)
        return 1 if args.strict else 0
    return 0
