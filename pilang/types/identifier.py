from __future__ import annotations
import sys


class Identifier:
    """A name appearing in source: an identifier atom of a parsed form."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        # Interned so that environment lookups hash and compare quickly
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Identifier) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Identifier({self.name!r})"

    def __str__(self):
        return self.name
