"""
Exception types raised by dynadict.

Every error derives from DynamicDictionaryError and from the built-in
exception a caller would expect for the same situation, so existing
``except ValueError`` / ``except AttributeError`` handlers keep working.
"""

import typing as _typing


class DynamicDictionaryError(Exception):
    """Base class for all dynadict errors."""

    pass


class DuplicateKeyError(DynamicDictionaryError, ValueError):
    """Raised when adding a key that already exists in the dictionary."""

    def __init__(self, key: _typing.Any) -> None:
        self.key = key
        super().__init__(f"An item with the same key has already been added: {key!r}")


class NullSourceError(DynamicDictionaryError, TypeError):
    """Raised when a copy constructor is given no source to copy from."""

    def __init__(self, argument: str = "source") -> None:
        self.argument = argument
        super().__init__(f"{argument} must not be None")


class NoSuchMemberError(DynamicDictionaryError, AttributeError):
    """
    Raised when a member cannot be invoked or deleted.

    Behaves like the AttributeError Python raises for an unknown member:
    ``name`` and ``obj`` are set the same way.
    """

    def __init__(self, name: str, obj: object = None) -> None:
        type_name = type(obj).__name__ if obj is not None else "object"
        super().__init__(
            f"{type_name!r} object has no member {name!r}",
            name=name,
            obj=obj,
        )


class UnknownComparerError(DynamicDictionaryError, LookupError):
    """Raised when a key comparer is requested by a name that is not registered."""

    def __init__(self, name: str, available: _typing.Iterable[str] = ()) -> None:
        self.name = name
        self.available = tuple(available)
        message = f"Unknown key comparer: {name!r}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)
