"""
Key comparers: pluggable equality strategies for dictionary keys.

A comparer decides which keys denote the same entry. It provides two
methods that must agree with each other: ``equals(a, b)`` and ``hash(a)``
(equal keys must hash equal).

The string comparers mirror the familiar .NET StringComparer family:

- ORDINAL: exact, case-sensitive comparison.
- ORDINAL_IGNORE_CASE: case-insensitive comparison using simple
  per-character case mapping (``"ß"`` does not match ``"SS"``).
- INVARIANT_CULTURE: case-sensitive comparison after Unicode NFKC
  normalization, so composed and decomposed forms match.
- INVARIANT_CULTURE_IGNORE_CASE: NFKC normalization plus full Unicode case
  folding (full-width ``"Ｎａｍｅ"`` matches ``"NAME"``).

Example:
    >>> import dynadict.comparers as comparers
    >>> comparers.ORDINAL_IGNORE_CASE.equals("Name", "NAME")
    True
    >>> comparers.get_comparer("ordinal").equals("Name", "NAME")
    False
"""

from __future__ import annotations

import abc as _abc
import typing as _typing
import unicodedata as _unicodedata

import dynadict.errors as errors

_K = _typing.TypeVar("_K")


class KeyComparer(_abc.ABC, _typing.Generic[_K]):
    """Equality strategy for dictionary keys."""

    @_abc.abstractmethod
    def equals(self, a: _K, b: _K) -> bool:
        """Return True if ``a`` and ``b`` denote the same key."""

    @_abc.abstractmethod
    def hash(self, key: _K) -> int:
        """Return a hash consistent with ``equals``."""

    @property
    def ignores_case(self) -> bool:
        """Whether keys differing only in letter case compare equal."""
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class StructuralComparer(KeyComparer[_typing.Any]):
    """Plain Python equality: ``==`` and ``hash()``."""

    def equals(self, a: _typing.Any, b: _typing.Any) -> bool:
        return bool(a == b)

    def hash(self, key: _typing.Any) -> int:
        return hash(key)


class FunctionComparer(KeyComparer[_K]):
    """
    Comparer built from a pair of functions.

    Args:
        equals: Returns True when two keys denote the same entry.
        hash: Hash function consistent with ``equals``.
        ignores_case: Whether the pair treats letter case as insignificant.
    """

    def __init__(
        self,
        equals: _typing.Callable[[_K, _K], bool],
        hash: _typing.Callable[[_K], int],  # noqa: A002 - mirrors the comparer protocol
        *,
        ignores_case: bool = False,
    ) -> None:
        self._equals = equals
        self._hash = hash
        self._ignores_case = ignores_case

    def equals(self, a: _K, b: _K) -> bool:
        return bool(self._equals(a, b))

    def hash(self, key: _K) -> int:
        return self._hash(key)

    @property
    def ignores_case(self) -> bool:
        return self._ignores_case


class StringComparer(KeyComparer[str]):
    """
    Base for string comparers that work by normalizing keys.

    Two keys are equal when their normalized forms are equal. Non-string
    keys are compared structurally and never equal a string key.
    """

    name: _typing.ClassVar[str] = ""

    @_abc.abstractmethod
    def normalize(self, key: str) -> str:
        """Return the form of ``key`` used for comparison and hashing."""

    def equals(self, a: str, b: str) -> bool:
        if isinstance(a, str) and isinstance(b, str):
            return self.normalize(a) == self.normalize(b)
        if isinstance(a, str) or isinstance(b, str):
            return False
        return bool(a == b)

    def hash(self, key: str) -> int:
        if isinstance(key, str):
            return hash(self.normalize(key))
        return hash(key)

    def __reduce__(self) -> str | tuple[_typing.Any, ...]:
        # Registered comparers pickle as references to the module singletons
        if _REGISTRY.get(self.name) is self:
            return _REDUCE_NAMES[self.name]
        return super().__reduce__()

    def __repr__(self) -> str:
        return f"StringComparer({self.name!r})"


class OrdinalComparer(StringComparer):
    name = "ordinal"

    def normalize(self, key: str) -> str:
        return key


class OrdinalIgnoreCaseComparer(StringComparer):
    name = "ordinal_ignore_case"

    def normalize(self, key: str) -> str:
        # Simple per-character mapping: "ß" stays "ß" rather than becoming "SS"
        return "".join(upper if len(upper := char.upper()) == 1 else char for char in key)

    @property
    def ignores_case(self) -> bool:
        return True


class InvariantCultureComparer(StringComparer):
    name = "invariant_culture"

    def normalize(self, key: str) -> str:
        return _unicodedata.normalize("NFKC", key)


class InvariantCultureIgnoreCaseComparer(StringComparer):
    name = "invariant_culture_ignore_case"

    def normalize(self, key: str) -> str:
        return _unicodedata.normalize("NFKC", key).casefold()

    @property
    def ignores_case(self) -> bool:
        return True


STRUCTURAL = StructuralComparer()
ORDINAL = OrdinalComparer()
ORDINAL_IGNORE_CASE = OrdinalIgnoreCaseComparer()
INVARIANT_CULTURE = InvariantCultureComparer()
INVARIANT_CULTURE_IGNORE_CASE = InvariantCultureIgnoreCaseComparer()

_REGISTRY: dict[str, StringComparer] = {
    comparer.name: comparer
    for comparer in (
        ORDINAL,
        ORDINAL_IGNORE_CASE,
        INVARIANT_CULTURE,
        INVARIANT_CULTURE_IGNORE_CASE,
    )
}

# Global names used by pickle to restore the singletons
_REDUCE_NAMES = {
    "ordinal": "ORDINAL",
    "ordinal_ignore_case": "ORDINAL_IGNORE_CASE",
    "invariant_culture": "INVARIANT_CULTURE",
    "invariant_culture_ignore_case": "INVARIANT_CULTURE_IGNORE_CASE",
}


def comparer_names(*, ignore_case_only: bool = False) -> list[str]:
    """
    Return the names of the registered string comparers.

    Args:
        ignore_case_only: Only include comparers that ignore letter case.
    """
    return [
        name
        for name, comparer in _REGISTRY.items()
        if comparer.ignores_case or not ignore_case_only
    ]


def get_comparer(name: str) -> StringComparer:
    """
    Look up a registered string comparer by name.

    Names are matched case-insensitively, and ``-`` may be used in place
    of ``_`` (``"Ordinal-Ignore-Case"`` works).

    Raises:
        UnknownComparerError: If no comparer has that name.
    """
    normalized = name.strip().lower().replace("-", "_")
    try:
        return _REGISTRY[normalized]
    except KeyError:
        raise errors.UnknownComparerError(name, _REGISTRY) from None
