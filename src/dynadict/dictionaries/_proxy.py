"""
MemberInvoker for DynamicDictionary.

Attribute reads on a DynamicDictionary cannot tell ``d.Greet`` apart from
``d.Greet(...)``, so a missing member reads as None. The invoker is the
method-call view: every attribute is a bound invocation of the entry with
that name, and an absent or non-callable entry raises NoSuchMemberError.

Example:
    >>> d = DynamicDictionary()
    >>> d.Greet = lambda name: f"Hello, {name}!"
    >>> d.invoke.greet("World")
    'Hello, World!'
    >>> d.invoke.NoSuchMethod()  # NoSuchMemberError
"""

from __future__ import annotations

import functools as _functools
import typing as _typing

import dynadict.dictionaries._keys as _keys

if _typing.TYPE_CHECKING:
    import dynadict.dictionaries._dynamic as _dynamic


class MemberInvoker:
    """Method-call view over a DynamicDictionary's callable entries."""

    __slots__ = ("_owner",)

    def __init__(self, owner: _dynamic.DynamicDictionary) -> None:
        self._owner = owner

    def __getattr__(self, name: str) -> _typing.Callable[..., _typing.Any]:
        if _keys.is_special_name(name) or name in MemberInvoker.__slots__:
            raise AttributeError(name)
        return _functools.partial(self._owner.invoke_member, name)

    def __dir__(self) -> list[str]:
        return sorted(
            key
            for key, value in self._owner.items()
            if isinstance(key, str) and key.isidentifier() and callable(value)
        )

    def __repr__(self) -> str:
        return f"MemberInvoker({self.__dir__()!r})"
