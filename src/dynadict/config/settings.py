"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with DYNADICT_ prefix
3. .env file named by DYNADICT_ENV_FILE (if set and present)
4. Field defaults

Example:
    DYNADICT_DEFAULT_COMPARER=invariant_culture_ignore_case
"""

import functools as _functools
import logging as _logging
import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import dynadict.comparers as comparers
import dynadict.errors as errors

_logger = _logging.getLogger(__name__)

# Environment variable naming an explicit .env file
ENV_FILE_VAR = "DYNADICT_ENV_FILE"

DEFAULT_COMPARER_NAME = comparers.ORDINAL_IGNORE_CASE.name


def _get_env_file() -> str | None:
    """Determine which .env file to load.

    Only an explicitly named file is loaded. If DYNADICT_ENV_FILE is set but
    the file does not exist, nothing is loaded (no silent fallback).
    """
    if env_file := _os.environ.get(ENV_FILE_VAR):
        if _pathlib.Path(env_file).exists():
            return env_file
    return None


class Settings(_pydantic_settings.BaseSettings):
    """
    dynadict configuration settings.

    All settings can be overridden via environment variables with the
    DYNADICT_ prefix.
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix="DYNADICT_",
        env_file=_get_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_comparer: str = _pydantic.Field(
        default=DEFAULT_COMPARER_NAME,
        description="Key comparer DynamicDictionary uses when none is given",
    )
    """Name of a case-insensitive comparer from dynadict.comparers."""

    @_pydantic.field_validator("default_comparer")
    @classmethod
    def _validate_default_comparer(cls, v: str) -> str:
        """Accept only registered comparers that ignore case."""
        try:
            comparer = comparers.get_comparer(v)
        except errors.UnknownComparerError as e:
            raise ValueError(str(e)) from e
        if not comparer.ignores_case:
            allowed = ", ".join(comparers.comparer_names(ignore_case_only=True))
            raise ValueError(
                f"default_comparer must ignore case, got {v!r} (allowed: {allowed})"
            )
        return comparer.name

    @classmethod
    def construct_without_dotenv(cls, **kwargs: _typing.Any) -> "Settings":
        """Create Settings from environment variables only, without loading .env file.

        Useful for test isolation and for reproducing issues without .env
        interference.
        """
        return cls(_env_file=None, **kwargs)  # type: ignore[call-arg]

    def key_comparer(self) -> comparers.StringComparer:
        """Return the comparer named by ``default_comparer``."""
        return comparers.get_comparer(self.default_comparer)


@_functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide Settings, loading them on first use."""
    # Re-read DYNADICT_ENV_FILE so reset_settings() picks up a new file
    settings = Settings(_env_file=_get_env_file())  # type: ignore[call-arg]
    _logger.debug("Loaded settings: default_comparer=%s", settings.default_comparer)
    return settings


def reset_settings() -> None:
    """Forget the cached Settings so the next get_settings() reloads them.

    The reload re-reads the environment, including DYNADICT_ENV_FILE.
    """
    get_settings.cache_clear()
