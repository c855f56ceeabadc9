"""Tests for configuration settings."""

import os as _os
import pathlib as _pathlib
import unittest.mock as _mock

import pydantic as _pydantic
import pytest as _pytest

import dynadict.comparers as comparers
import dynadict.config as config
import dynadict.config.settings as settings_module

# Keys to clear from environment for isolated tests
ENV_KEYS_TO_CLEAR = [
    "DYNADICT_DEFAULT_COMPARER",
    "DYNADICT_ENV_FILE",
]


def clean_env() -> dict[str, str]:
    """Return environment dict with test-related keys removed."""
    return {k: v for k, v in _os.environ.items() if k not in ENV_KEYS_TO_CLEAR}


class TestSettingsDefaults:
    """Test Settings default values when environment is clean."""

    def test_default_comparer_is_ordinal_ignore_case(self) -> None:
        with _mock.patch.dict(_os.environ, clean_env(), clear=True):
            settings = config.Settings.construct_without_dotenv()

            assert settings.default_comparer == "ordinal_ignore_case"
            assert settings.default_comparer == config.DEFAULT_COMPARER_NAME

    def test_key_comparer_resolves_name(self) -> None:
        with _mock.patch.dict(_os.environ, clean_env(), clear=True):
            settings = config.Settings.construct_without_dotenv()

            assert settings.key_comparer() is comparers.ORDINAL_IGNORE_CASE


class TestSettingsEnvironment:
    """Environment variables override defaults."""

    def test_env_override(self) -> None:
        env = clean_env()
        env["DYNADICT_DEFAULT_COMPARER"] = "invariant_culture_ignore_case"
        with _mock.patch.dict(_os.environ, env, clear=True):
            settings = config.Settings.construct_without_dotenv()

            assert settings.key_comparer() is comparers.INVARIANT_CULTURE_IGNORE_CASE

    def test_name_is_normalized(self) -> None:
        """Spellings accepted by get_comparer are stored in canonical form."""
        settings = config.Settings.construct_without_dotenv(
            default_comparer="Invariant-Culture-Ignore-Case"
        )

        assert settings.default_comparer == "invariant_culture_ignore_case"

    def test_case_sensitive_comparer_rejected(self) -> None:
        """Configuration can never make DynamicDictionary case-sensitive."""
        with _pytest.raises(_pydantic.ValidationError, match="must ignore case"):
            config.Settings.construct_without_dotenv(default_comparer="ordinal")

    def test_unknown_comparer_rejected(self) -> None:
        with _pytest.raises(_pydantic.ValidationError, match="Unknown key comparer"):
            config.Settings.construct_without_dotenv(default_comparer="current_culture")

    def test_env_file_loaded(self, tmp_path: _pathlib.Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("DYNADICT_DEFAULT_COMPARER=invariant_culture_ignore_case\n")
        with _mock.patch.dict(_os.environ, clean_env(), clear=True):
            settings = config.Settings(_env_file=env_file)  # type: ignore[call-arg]

            assert settings.default_comparer == "invariant_culture_ignore_case"


class TestEnvFileSelection:
    """DYNADICT_ENV_FILE names the .env file to load."""

    def test_no_env_file_by_default(self) -> None:
        with _mock.patch.dict(_os.environ, clean_env(), clear=True):
            assert settings_module._get_env_file() is None

    def test_existing_env_file(self, tmp_path: _pathlib.Path) -> None:
        env_file = tmp_path / "custom.env"
        env_file.write_text("")
        env = clean_env()
        env["DYNADICT_ENV_FILE"] = str(env_file)
        with _mock.patch.dict(_os.environ, env, clear=True):
            assert settings_module._get_env_file() == str(env_file)

    def test_missing_env_file_not_loaded(self, tmp_path: _pathlib.Path) -> None:
        env = clean_env()
        env["DYNADICT_ENV_FILE"] = str(tmp_path / "missing.env")
        with _mock.patch.dict(_os.environ, env, clear=True):
            assert settings_module._get_env_file() is None


class TestCachedSettings:
    """get_settings() caches until reset_settings()."""

    def test_cached(self) -> None:
        assert config.get_settings() is config.get_settings()

    def test_reset_reloads(self, monkeypatch: _pytest.MonkeyPatch) -> None:
        first = config.get_settings()
        monkeypatch.setenv("DYNADICT_DEFAULT_COMPARER", "invariant_culture_ignore_case")

        assert config.get_settings() is first

        config.reset_settings()

        assert config.get_settings().default_comparer == "invariant_culture_ignore_case"

    def test_reset_loads_env_file_named_later(
        self, monkeypatch: _pytest.MonkeyPatch, tmp_path: _pathlib.Path
    ) -> None:
        """An env file named after the first load is read on reload."""
        assert config.get_settings().default_comparer == comparers.ORDINAL_IGNORE_CASE.name

        env_file = tmp_path / "late.env"
        env_file.write_text("DYNADICT_DEFAULT_COMPARER=invariant_culture_ignore_case\n")
        monkeypatch.setenv("DYNADICT_ENV_FILE", str(env_file))
        config.reset_settings()

        reloaded = config.get_settings()

        assert reloaded.default_comparer == "invariant_culture_ignore_case"
        assert reloaded.key_comparer() is comparers.INVARIANT_CULTURE_IGNORE_CASE
