"""
Shared pytest fixtures for dynadict tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import typing as _typing

import pytest as _pytest

import dynadict.config as config

# Environment keys that should be cleared for isolated tests
ENV_KEYS_TO_CLEAR = [
    "DYNADICT_DEFAULT_COMPARER",
    "DYNADICT_ENV_FILE",
]


@_pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: _pytest.MonkeyPatch) -> _typing.Iterator[None]:
    """Run every test with a clean DYNADICT_ environment and no cached Settings."""
    for key in ENV_KEYS_TO_CLEAR:
        monkeypatch.delenv(key, raising=False)
    config.reset_settings()
    yield
    config.reset_settings()
