"""
Hashable key wrapper that applies a KeyComparer.

Python dicts only know ``__eq__`` and ``__hash__``, so keys are wrapped in
a ComparedKey that routes both through the dictionary's comparer while
keeping the caller's original key for iteration.
"""

from __future__ import annotations

import typing as _typing

if _typing.TYPE_CHECKING:
    import dynadict.comparers as _comparers


class ComparedKey:
    """A key paired with the comparer that defines its equality."""

    __slots__ = ("key", "_comparer", "_hash")

    def __init__(self, key: _typing.Any, comparer: _comparers.KeyComparer[_typing.Any]) -> None:
        self.key = key
        self._comparer = comparer
        self._hash = comparer.hash(key)

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComparedKey):
            return NotImplemented
        return self._comparer.equals(self.key, other.key)

    def __repr__(self) -> str:
        return f"ComparedKey({self.key!r})"


def is_special_name(name: str) -> bool:
    """True for dunder names, which are never routed to entries."""
    return len(name) > 4 and name.startswith("__") and name.endswith("__")
