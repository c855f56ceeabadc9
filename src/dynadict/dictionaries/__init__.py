"""
Dictionaries with default values, pluggable key equality and member access.

- DefaultValueDictionary: generic mapping that returns a default value
  (None unless configured) for missing keys instead of raising KeyError.
- DynamicDictionary: case-insensitive string-keyed mapping whose entries
  can also be read, written and invoked as attributes.

Example:
    >>> from dynadict.dictionaries import DynamicDictionary
    >>> d = DynamicDictionary()
    >>> d.Name = "Ada"
    >>> d["NAME"]
    'Ada'
"""

from dynadict.dictionaries._default_value import DefaultValueDictionary
from dynadict.dictionaries._dynamic import (
    DEFAULT_KEY_COMPARER,
    DynamicDictionary,
    default_key_comparer,
)
from dynadict.dictionaries._proxy import MemberInvoker

__all__ = [
    "DEFAULT_KEY_COMPARER",
    "DefaultValueDictionary",
    "DynamicDictionary",
    "MemberInvoker",
    "default_key_comparer",
]
