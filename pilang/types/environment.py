"""Runtime environment for pilang.

There is exactly one Environment per program run: a flat mapping from
Identifiers to Values with no nested scopes. Every top-level form, function
body and imported file reads and writes the same mapping, so a function's
parameters stay bound (and shadow nothing) after the call returns.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional, Union

from pilang.errors import PiUndefinedIdentifier
from pilang.types.identifier import Identifier
from pilang.types.value import Value

Name = Union[Identifier, str]


def _as_identifier(name: Name) -> Identifier:
    return name if isinstance(name, Identifier) else Identifier(name)


class Environment:
    """Single, shared, mutable mapping from names to values."""

    __slots__ = ("vars",)

    def __init__(self):
        self.vars: dict[Identifier, Value] = {}

    def define(self, name: Name, value: Value) -> None:
        """Bind `name` to `value`, overwriting any existing binding."""
        self.vars[_as_identifier(name)] = value

    def get(self, name: Name) -> Optional[Value]:
        return self.vars.get(_as_identifier(name))

    def lookup(self, name: Name, line: Optional[int] = None) -> Value:
        """Return the value bound to `name`; raises PiUndefinedIdentifier if unbound."""
        ident = _as_identifier(name)
        try:
            return self.vars[ident]
        except KeyError:
            raise PiUndefinedIdentifier(ident.name, line) from None

    def __contains__(self, name: Name) -> bool:
        return _as_identifier(name) in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __iter__(self) -> Iterator[Identifier]:
        return iter(self.vars)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {self}>"
