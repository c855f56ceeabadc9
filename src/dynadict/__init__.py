"""
dynadict - dictionaries that forgive missing keys.

A case-insensitive, default-returning dictionary with attribute-style
access, built on a generic DefaultValueDictionary with pluggable key
comparers.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("dynadict")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)

from dynadict.comparers import KeyComparer, StringComparer  # noqa: E402
from dynadict.dictionaries import DefaultValueDictionary, DynamicDictionary  # noqa: E402
from dynadict.errors import (  # noqa: E402
    DuplicateKeyError,
    DynamicDictionaryError,
    NoSuchMemberError,
    NullSourceError,
    UnknownComparerError,
)

__all__ = [
    "__version__",
    "__version_info__",
    "DefaultValueDictionary",
    "DuplicateKeyError",
    "DynamicDictionary",
    "DynamicDictionaryError",
    "KeyComparer",
    "NoSuchMemberError",
    "NullSourceError",
    "StringComparer",
    "UnknownComparerError",
]
