"""Runtime values for pilang.

A Value is a mutable tagged record: a number, a function, or a list. Lists do not
own their elements directly; they hold a ListView, a window onto a shared storage
list of Value slots. `index` hands out the slot itself and `range` hands out a
narrower window onto the same storage, so an `edit` through any one of them is
seen through all of them.
"""

from __future__ import annotations

from enum import Enum
from io import StringIO
from typing import Iterable, Iterator, Optional

from pilang.errors import PiIndexError
from pilang.types.function import Function


def wrap_i64(n: int) -> int:
    """Reduce n to a signed 64-bit integer the way machine arithmetic does."""
    n &= 0xFFFFFFFFFFFFFFFF
    return n - (1 << 64) if n & (1 << 63) else n


class ValueKind(Enum):
    NUMBER = "number"
    FUNCTION = "function"
    LIST = "list"


class ListView:
    """A [start, stop) window onto shared list storage."""

    __slots__ = ("storage", "start", "stop")

    def __init__(self, storage: list[Value], start: int = 0, stop: Optional[int] = None):
        self.storage = storage
        self.start = start
        self.stop = len(storage) if stop is None else stop

    def __len__(self) -> int:
        return self.stop - self.start

    def __iter__(self) -> Iterator[Value]:
        for i in range(self.start, self.stop):
            yield self.storage[i]

    def slot(self, index: int, line: Optional[int] = None) -> Value:
        """Return the storage slot at `index` (0-based, relative to this view)."""
        if index < 0 or index >= len(self):
            raise PiIndexError(f"index out of range [{index}] with length {len(self)}", line)
        return self.storage[self.start + index]

    def window(self, lo: int, hi: Optional[int] = None, line: Optional[int] = None) -> ListView:
        """Return a view of [lo, hi) (or [lo, end) when hi is None) sharing this storage."""
        n = len(self)
        if hi is None:
            hi = n
        if lo < 0 or hi < 0 or hi > n or lo > hi:
            raise PiIndexError(f"slice bounds out of range [{lo}:{hi}] with length {n}", line)
        return ListView(self.storage, self.start + lo, self.start + hi)


class Value:
    """A number, function or list; slots of list storage are Values too."""

    __slots__ = ("kind", "number", "function", "elements")

    def __init__(
        self,
        kind: ValueKind,
        number: int = 0,
        function: Optional[Function] = None,
        elements: Optional[ListView] = None,
    ):
        self.kind = kind
        self.number = number
        self.function = function
        self.elements = elements

    @classmethod
    def of_number(cls, n: int) -> Value:
        return cls(ValueKind.NUMBER, number=wrap_i64(n))

    @classmethod
    def of_function(cls, fn: Function) -> Value:
        return cls(ValueKind.FUNCTION, function=fn)

    @classmethod
    def of_list(cls, items: Iterable[Value]) -> Value:
        """Build a list with fresh storage; each item is copied into its own slot."""
        return cls(ValueKind.LIST, elements=ListView([v.copy() for v in items]))

    @classmethod
    def of_view(cls, view: ListView) -> Value:
        return cls(ValueKind.LIST, elements=view)

    @property
    def is_number(self) -> bool:
        return self.kind is ValueKind.NUMBER

    @property
    def is_function(self) -> bool:
        return self.kind is ValueKind.FUNCTION

    @property
    def is_list(self) -> bool:
        return self.kind is ValueKind.LIST

    def copy(self) -> Value:
        # Shallow: a copied list still shares its storage.
        return Value(self.kind, self.number, self.function, self.elements)

    def assign(self, other: Value) -> None:
        """Overwrite this value in place with the contents of `other`."""
        self.kind = other.kind
        self.number = other.number
        self.function = other.function
        self.elements = other.elements

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value) or other.kind is not self.kind:
            return False
        if self.is_number:
            return self.number == other.number
        if self.is_function:
            return self.function is other.function
        return len(self.elements) == len(other.elements) and all(
            a == b for a, b in zip(self.elements, other.elements)
        )

    __hash__ = None

    def __str__(self) -> str:
        if self.is_number:
            return str(self.number)
        if self.is_function:
            return str(self.function)
        with StringIO() as buffer:
            buffer.write("[list")
            for item in self.elements:
                buffer.write(" ")
                buffer.write(str(item))
            buffer.write("]")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Value({self.kind.name}, {self})"
