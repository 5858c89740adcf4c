"""Function values and argument binding for pilang."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Iterable

from pilang import SExpression
from pilang.types.identifier import Identifier

if TYPE_CHECKING:
    from pilang.types.environment import Environment
    from pilang.types.value import Value


class Function:
    """Parameter names plus a body form. No bindings are captured."""

    __slots__ = ("params", "body")

    def __init__(self, params: list[Identifier], body: SExpression):
        self.params: list[Identifier] = params
        self.body: SExpression = body

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<function [")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write("]>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def bind_arguments(self, args: Iterable[Value], env: Environment) -> None:
        """
        Bind each parameter to its argument directly in the shared environment.

        `args` may be lazy: argument i is pulled only after parameter i-1 has been
        bound, so later argument expressions see earlier parameter bindings.

        Earlier bindings of the same names are overwritten and are not restored
        when the call returns.
        """
        for param, arg in zip(self.params, args):
            env.define(param, arg)
