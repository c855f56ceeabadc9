"""
Shared fixtures for dictionary tests.
"""

import pytest as _pytest

import dynadict.dictionaries as dictionaries


@_pytest.fixture
def hero() -> dictionaries.DynamicDictionary:
    """DynamicDictionary with a couple of mixed-case entries."""
    d = dictionaries.DynamicDictionary()
    d.SuperHeroName = "Superman"
    d["AlterEgo"] = "Clark Kent"
    return d


@_pytest.fixture
def counts() -> dictionaries.DefaultValueDictionary[str, int]:
    """DefaultValueDictionary whose missing keys read as 0."""
    return dictionaries.DefaultValueDictionary({"apples": 3, "pears": 1}, default_factory=int)


@_pytest.fixture
def greeter() -> dictionaries.DynamicDictionary:
    """DynamicDictionary holding callables and a non-callable entry."""
    d = dictionaries.DynamicDictionary()
    d.Greet = lambda name: f"Hello, {name}!"
    d.Add = lambda a, b=0: a + b
    d.Title = "not callable"
    return d