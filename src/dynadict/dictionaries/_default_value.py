"""
DefaultValueDictionary: a mapping that never fails on a missing-key read.

Reading a key that is not present returns the dictionary's default value
(``None`` unless a ``default_factory`` is given) instead of raising
KeyError. Everything that inspects presence (``in``, ``remove``,
``try_get``, iteration, ``len``) behaves like a regular dict.

Unlike ``collections.defaultdict``, a missing-key read never inserts the
default into the dictionary.

Example:
    >>> counts = DefaultValueDictionary(default_factory=int)
    >>> counts["apples"]
    0
    >>> "apples" in counts
    False
"""

from __future__ import annotations

import collections.abc as _abc
import logging as _logging
import typing as _typing

import dynadict.comparers as comparers
import dynadict.dictionaries._keys as _keys
import dynadict.errors as errors

_logger = _logging.getLogger(__name__)

_K = _typing.TypeVar("_K")
_V = _typing.TypeVar("_V")

# Sentinel distinguishing "no default passed" from an explicit None
_MISSING: _typing.Any = object()


def iter_source_items(
    source: _abc.Mapping[_typing.Any, _typing.Any]
    | _abc.Iterable[tuple[_typing.Any, _typing.Any]],
) -> _abc.Iterator[tuple[_typing.Any, _typing.Any]]:
    """Yield (key, value) pairs from a mapping or an iterable of pairs."""
    if isinstance(source, _abc.Mapping):
        yield from source.items()
        return
    for item in source:
        key, value = item
        yield key, value


class _ItemsView(_abc.ItemsView[_K, _V]):
    """Items view whose membership test respects presence, not defaults."""

    _mapping: DefaultValueDictionary[_K, _V]

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, tuple) or len(item) != 2:
            return False
        return self._mapping.contains_item(item)


class DefaultValueDictionary(_abc.MutableMapping[_K, _V]):
    """
    A mutable mapping that returns a default value for missing keys.

    Args:
        source: Optional mapping or iterable of (key, value) pairs to copy
            entries from. The source is copied, never aliased.
        comparer: KeyComparer deciding which keys are equal. Defaults to
            plain Python equality (comparers.STRUCTURAL).
        default_factory: Zero-argument callable producing the value returned
            for missing keys. ``None`` means missing keys read as ``None``.

    Raises:
        DuplicateKeyError: If two source keys are equal under ``comparer``.

    Note:
        The first spelling of a key is the one kept: assigning to an equal
        key (for example a different casing under a case-insensitive
        comparer) replaces the value but not the stored key.

        **Thread safety:** Not thread-safe. Concurrent writes, or a write
        concurrent with reads, need external synchronization (e.g.
        ``threading.Lock``).
    """

    def __init__(
        self,
        source: _abc.Mapping[_K, _V] | _abc.Iterable[tuple[_K, _V]] | None = None,
        comparer: comparers.KeyComparer[_K] | None = None,
        *,
        default_factory: _typing.Callable[[], _V] | None = None,
    ) -> None:
        self._comparer: comparers.KeyComparer[_typing.Any] = (
            comparer if comparer is not None else comparers.STRUCTURAL
        )
        self._default_factory = default_factory
        self._data: dict[_keys.ComparedKey, _V] = {}

        if source is not None:
            for key, value in iter_source_items(source):
                self.add(key, value)
            _logger.debug(
                "Copied %d entries into %s using %r",
                len(self._data),
                type(self).__name__,
                self._comparer,
            )

    @classmethod
    def from_mapping(
        cls,
        source: _abc.Mapping[_K, _V] | _abc.Iterable[tuple[_K, _V]] | None,
        comparer: comparers.KeyComparer[_K] | None = None,
        *,
        default_factory: _typing.Callable[[], _V] | None = None,
    ) -> DefaultValueDictionary[_K, _V]:
        """
        Copy-construct a dictionary from an existing source.

        Unlike the constructor, the source is required.

        Raises:
            NullSourceError: If ``source`` is None.
            DuplicateKeyError: If two source keys are equal under ``comparer``.
        """
        if source is None:
            raise errors.NullSourceError("source")
        return cls(source, comparer, default_factory=default_factory)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def comparer(self) -> comparers.KeyComparer[_typing.Any]:
        """The KeyComparer used for key equality."""
        return self._comparer

    @property
    def default_factory(self) -> _typing.Callable[[], _V] | None:
        """Factory for the value returned on missing-key reads."""
        return self._default_factory

    @property
    def count(self) -> int:
        """Number of entries."""
        return len(self._data)

    @property
    def is_read_only(self) -> bool:
        """Always False: the dictionary is mutable."""
        return False

    def default_value(self) -> _V:
        """Return the value produced for a missing key."""
        if self._default_factory is None:
            return _typing.cast(_V, None)
        return self._default_factory()

    # =========================================================================
    # Mapping protocol
    # =========================================================================

    def _wrap(self, key: _typing.Any) -> _keys.ComparedKey:
        return _keys.ComparedKey(key, self._comparer)

    def __getitem__(self, key: _K) -> _V:
        """Return the stored value, or the default value if absent."""
        value = self._data.get(self._wrap(key), _MISSING)
        if value is _MISSING:
            return self.default_value()
        return _typing.cast(_V, value)

    def __setitem__(self, key: _K, value: _V) -> None:
        wrapped = self._wrap(key)
        # dict keeps the first key object on overwrite, preserving spelling
        self._data[wrapped] = value

    def __delitem__(self, key: _K) -> None:
        try:
            del self._data[self._wrap(key)]
        except KeyError:
            raise KeyError(key) from None

    def __iter__(self) -> _abc.Iterator[_K]:
        for wrapped in self._data:
            yield wrapped.key

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return self._wrap(key) in self._data

    def __eq__(self, other: object) -> bool:
        """Equal to any mapping holding the same entries under this comparer."""
        if not isinstance(other, _abc.Mapping):
            return NotImplemented
        if len(self) != len(other):
            return False
        matched: set[_keys.ComparedKey] = set()
        for key, value in other.items():
            wrapped = self._wrap(key)
            stored = self._data.get(wrapped, _MISSING)
            if stored is _MISSING or stored != value:
                return False
            matched.add(wrapped)
        # Keys of other that collide under this comparer match one entry twice
        return len(matched) == len(self._data)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        content = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"{type(self).__name__}({{{content}}})"

    def __copy__(self) -> DefaultValueDictionary[_K, _V]:
        return self.copy()

    def __reduce__(self) -> tuple[_typing.Any, ...]:
        # Hashes are recomputed on load; str hashes differ between processes
        return (
            type(self),
            (list(self.items()), self._comparer),
            {"_default_factory": self._default_factory},
        )

    def keys(self) -> _abc.KeysView[_K]:
        return _abc.KeysView(self)

    def values(self) -> _abc.ValuesView[_V]:
        return _abc.ValuesView(self)

    def items(self) -> _abc.ItemsView[_K, _V]:
        return _ItemsView(self)

    def get(self, key: _K, default: _typing.Any = _MISSING) -> _typing.Any:
        """
        Return the value for ``key``.

        Without ``default`` this is the same as ``d[key]``: a missing key
        yields the dictionary's default value. An explicit ``default`` is
        returned instead for missing keys.
        """
        value = self._data.get(self._wrap(key), _MISSING)
        if value is not _MISSING:
            return value
        if default is _MISSING:
            return self.default_value()
        return default

    def pop(self, key: _K, default: _typing.Any = _MISSING) -> _typing.Any:
        """Remove ``key`` and return its value; KeyError if absent and no default."""
        value = self._data.pop(self._wrap(key), _MISSING)
        if value is not _MISSING:
            return value
        if default is _MISSING:
            raise KeyError(key)
        return default

    def setdefault(self, key: _K, default: _typing.Any = None) -> _typing.Any:
        return self._data.setdefault(self._wrap(key), default)

    def clear(self) -> None:
        self._data.clear()

    def copy(self) -> DefaultValueDictionary[_K, _V]:
        """Return an independent copy with the same comparer and default."""
        return type(self)(
            self.items(),
            self._comparer,
            default_factory=self._default_factory,
        )

    # =========================================================================
    # Explicit dictionary operations
    # =========================================================================

    def set(self, key: _K, value: _V) -> None:
        """Insert or overwrite ``key``."""
        self[key] = value

    def add(self, key: _K, value: _V) -> None:
        """
        Insert ``key``, which must not already be present.

        Raises:
            DuplicateKeyError: If an equal key exists. The dictionary is
                left unchanged.
        """
        wrapped = self._wrap(key)
        if wrapped in self._data:
            raise errors.DuplicateKeyError(key)
        self._data[wrapped] = value

    def contains_key(self, key: _K) -> bool:
        return key in self

    def remove(self, key: _K) -> bool:
        """Remove ``key``. Returns True if it was present, False otherwise."""
        return self._data.pop(self._wrap(key), _MISSING) is not _MISSING

    def try_get(self, key: _K) -> tuple[bool, _V]:
        """
        Presence-aware read.

        Returns:
            ``(True, value)`` if present, else ``(False, default value)``.
        """
        value = self._data.get(self._wrap(key), _MISSING)
        if value is _MISSING:
            return False, self.default_value()
        return True, _typing.cast(_V, value)

    # =========================================================================
    # Pair operations
    # =========================================================================

    def add_item(self, item: tuple[_K, _V]) -> None:
        """Add a (key, value) pair. Raises DuplicateKeyError if the key exists."""
        key, value = item
        self.add(key, value)

    def contains_item(self, item: tuple[_K, _V]) -> bool:
        """True if the key is present and its value equals the pair's value."""
        key, value = item
        found, stored = self.try_get(key)
        return found and stored == value

    def remove_item(self, item: tuple[_K, _V]) -> bool:
        """Remove the pair only if the key is present with an equal value."""
        if not self.contains_item(item):
            return False
        key, _ = item
        return self.remove(key)

    def copy_to(self, target: list[_typing.Any], index: int = 0) -> None:
        """
        Write the entries as (key, value) tuples into ``target`` from ``index``.

        Raises:
            ValueError: If ``index`` is negative.
            IndexError: If ``target`` is too small to hold every entry.
        """
        if index < 0:
            raise ValueError(f"index must be non-negative, got {index}")
        if len(target) - index < len(self):
            raise IndexError(
                f"target has room for {max(len(target) - index, 0)} entries, "
                f"need {len(self)}"
            )
        for offset, pair in enumerate(self.items()):
            target[index + offset] = pair
