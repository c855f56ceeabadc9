"""
DynamicDictionary: a case-insensitive dictionary with member-style access.

Entries can be read, written and invoked as attributes:

    >>> d = DynamicDictionary()
    >>> d.SuperHeroName = "Superman"
    >>> d.superheroname, d["SUPERHERONAME"]
    ('Superman', 'Superman')
    >>> d.FirstName is None
    True

Member syntax and item syntax are two spellings of the same operations on
one internal DefaultValueDictionary.
"""

from __future__ import annotations

import collections.abc as _abc
import logging as _logging
import typing as _typing

import dynadict.comparers as comparers
import dynadict.config as config
import dynadict.dictionaries._default_value as _default_value
import dynadict.dictionaries._keys as _keys
import dynadict.dictionaries._proxy as _proxy
import dynadict.errors as errors

_logger = _logging.getLogger(__name__)

# Comparer used when nothing is configured
DEFAULT_KEY_COMPARER: comparers.StringComparer = comparers.ORDINAL_IGNORE_CASE


def default_key_comparer() -> comparers.KeyComparer[str]:
    """
    Return the comparer used when a DynamicDictionary is given none.

    This is DEFAULT_KEY_COMPARER unless DYNADICT_DEFAULT_COMPARER selects
    another case-insensitive comparer.
    """
    comparer = config.get_settings().key_comparer()
    _logger.debug("Using default key comparer %r", comparer)
    return comparer


class DynamicDictionary(_abc.MutableMapping[str, _typing.Any]):
    """
    A string-keyed dictionary with case-insensitive keys and member access.

    Reading a key that was never set returns None, whether by item
    (``d["Name"]``) or by attribute (``d.Name``). Attribute assignment
    upserts: an existing entry keeps its original key spelling, a new entry
    is stored under the exact name given.

    Callable entries can be invoked with ``d.invoke.Name(...)`` or
    ``d.invoke_member("Name", ...)``. Invoking an absent or non-callable
    entry raises NoSuchMemberError (an AttributeError). Because an attribute
    read returns the stored callable, ``d.Name(...)`` also works for
    entries that exist. For an absent entry it does not: ``d.Name`` reads
    as None, so ``d.Name(...)`` raises ``TypeError: 'NoneType' object is
    not callable``. Use ``d.invoke.Name(...)`` when the entry may be
    missing and NoSuchMemberError is wanted.

    Args:
        source: Optional mapping or iterable of (key, value) pairs to copy.
            The entries are copied into a new, exclusively owned dictionary.
        comparer: KeyComparer for keys. None means the default
            case-insensitive comparer (see default_key_comparer()).

    Raises:
        DuplicateKeyError: If two source keys are equal under the comparer.

    Note:
        Attributes defined by the class (``keys``, ``add``, ``invoke`` and
        the other methods below) and dunder names always resolve to the
        class. Entries with those names are still reachable as items.

        **Thread safety:** Not thread-safe. Use external synchronization
        for concurrent writes.
    """

    __slots__ = ("_dictionary",)

    _dictionary: _default_value.DefaultValueDictionary[str, _typing.Any]

    def __init__(
        self,
        source: _abc.Mapping[str, _typing.Any]
        | _abc.Iterable[tuple[str, _typing.Any]]
        | None = None,
        comparer: comparers.KeyComparer[str] | None = None,
    ) -> None:
        if comparer is None:
            comparer = default_key_comparer()
        object.__setattr__(
            self,
            "_dictionary",
            _default_value.DefaultValueDictionary(source, comparer),
        )

    @classmethod
    def from_mapping(
        cls,
        source: _abc.Mapping[str, _typing.Any]
        | _abc.Iterable[tuple[str, _typing.Any]]
        | None,
        comparer: comparers.KeyComparer[str] | None = None,
    ) -> DynamicDictionary:
        """
        Copy-construct from an existing string-keyed source.

        Raises:
            NullSourceError: If ``source`` is None.
            DuplicateKeyError: If two source keys are equal under the comparer.
        """
        if source is None:
            raise errors.NullSourceError("source")
        return cls(source, comparer)

    # =========================================================================
    # Member access
    # =========================================================================

    def __getattr__(self, name: str) -> _typing.Any:
        # Only reached when normal lookup fails
        if _keys.is_special_name(name) or name in DynamicDictionary.__slots__:
            raise AttributeError(name)
        return self.get_member(name)

    def __setattr__(self, name: str, value: _typing.Any) -> None:
        if _keys.is_special_name(name) or name in DynamicDictionary.__slots__:
            object.__setattr__(self, name, value)
            return
        self.set_member(name, value)

    def __delattr__(self, name: str) -> None:
        if _keys.is_special_name(name) or name in DynamicDictionary.__slots__:
            object.__delattr__(self, name)
            return
        if not self._dictionary.remove(name):
            raise errors.NoSuchMemberError(name, self)

    def __dir__(self) -> list[str]:
        members = set(super().__dir__())
        members.update(key for key in self if isinstance(key, str) and key.isidentifier())
        return sorted(members)

    def get_member(self, name: str) -> _typing.Any:
        """Member-style read: the entry's value, or None if absent."""
        return self._dictionary[name]

    def set_member(self, name: str, value: _typing.Any) -> None:
        """Member-style write: overwrite an existing entry or add a new one."""
        if self._dictionary.contains_key(name):
            self._dictionary[name] = value
        else:
            self._dictionary.add(name, value)

    def invoke_member(self, name: str, /, *args: _typing.Any, **kwargs: _typing.Any) -> _typing.Any:
        """
        Member-style invoke: call the entry ``name`` with the given arguments.

        Exceptions raised by the callable propagate unchanged.

        Raises:
            NoSuchMemberError: If no entry ``name`` exists or its value is
                not callable.
        """
        found, value = self._dictionary.try_get(name)
        if found and callable(value):
            return value(*args, **kwargs)
        raise errors.NoSuchMemberError(name, self)

    @property
    def invoke(self) -> _proxy.MemberInvoker:
        """Method-call view: ``d.invoke.Name(*args)`` calls the entry ``Name``."""
        return _proxy.MemberInvoker(self)

    # =========================================================================
    # Mapping protocol (delegated)
    # =========================================================================

    def __getitem__(self, key: str) -> _typing.Any:
        return self._dictionary[key]

    def __setitem__(self, key: str, value: _typing.Any) -> None:
        self._dictionary[key] = value

    def __delitem__(self, key: str) -> None:
        del self._dictionary[key]

    def __iter__(self) -> _abc.Iterator[str]:
        return iter(self._dictionary)

    def __len__(self) -> int:
        return len(self._dictionary)

    def __contains__(self, key: object) -> bool:
        return key in self._dictionary

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _abc.Mapping):
            return NotImplemented
        return self._dictionary == other

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        content = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"DynamicDictionary({{{content}}})"

    def __copy__(self) -> DynamicDictionary:
        return self.copy()

    def __reduce__(self) -> tuple[_typing.Any, ...]:
        return (type(self), (list(self.items()), self.comparer))

    def keys(self) -> _abc.KeysView[str]:
        return self._dictionary.keys()

    def values(self) -> _abc.ValuesView[_typing.Any]:
        return self._dictionary.values()

    def items(self) -> _abc.ItemsView[str, _typing.Any]:
        return self._dictionary.items()

    def get(self, key: str, default: _typing.Any = None) -> _typing.Any:
        return self._dictionary.get(key, default)

    def pop(self, key: str, *args: _typing.Any) -> _typing.Any:
        return self._dictionary.pop(key, *args)

    def setdefault(self, key: str, default: _typing.Any = None) -> _typing.Any:
        return self._dictionary.setdefault(key, default)

    def clear(self) -> None:
        self._dictionary.clear()

    def copy(self) -> DynamicDictionary:
        """Return an independent copy with the same comparer."""
        return type(self)(self.items(), self.comparer)

    # =========================================================================
    # Explicit dictionary operations (delegated)
    # =========================================================================

    @property
    def comparer(self) -> comparers.KeyComparer[str]:
        return self._dictionary.comparer

    @property
    def count(self) -> int:
        return self._dictionary.count

    @property
    def is_read_only(self) -> bool:
        return self._dictionary.is_read_only

    def set(self, key: str, value: _typing.Any) -> None:
        self._dictionary.set(key, value)

    def add(self, key: str, value: _typing.Any) -> None:
        """Insert ``key``; raises DuplicateKeyError if it already exists."""
        self._dictionary.add(key, value)

    def contains_key(self, key: str) -> bool:
        return self._dictionary.contains_key(key)

    def remove(self, key: str) -> bool:
        return self._dictionary.remove(key)

    def try_get(self, key: str) -> tuple[bool, _typing.Any]:
        return self._dictionary.try_get(key)

    def add_item(self, item: tuple[str, _typing.Any]) -> None:
        self._dictionary.add_item(item)

    def contains_item(self, item: tuple[str, _typing.Any]) -> bool:
        return self._dictionary.contains_item(item)

    def remove_item(self, item: tuple[str, _typing.Any]) -> bool:
        return self._dictionary.remove_item(item)

    def copy_to(self, target: list[_typing.Any], index: int = 0) -> None:
        self._dictionary.copy_to(target, index)
