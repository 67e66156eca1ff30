"""Unit tests for recon_engine.config."""

from __future__ import annotations

import pytest
from recon_engine.config import PlatformEnv, Settings, load_settings
from recon_engine.type_toolkit import Dialect

# ---------------------------------------------------------------------------
# Settings - default values
# ---------------------------------------------------------------------------


class TestSettingsDefaults:
    def test_default_env(self):
        assert Settings().env == PlatformEnv.DEV

    def test_default_debug(self):
        assert Settings().debug is False

    def test_default_dialect(self):
        assert Settings().default_dialect == Dialect.DATABRICKS

    def test_default_structured_logging(self):
        assert Settings().structured_logging is False


# ---------------------------------------------------------------------------
# Settings - environment variables
# ---------------------------------------------------------------------------


class TestSettingsFromEnv:
    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("RECON_ENV", "prod")
        monkeypatch.setenv("RECON_DEFAULT_DIALECT", "postgres")
        settings = Settings()
        assert settings.env == PlatformEnv.PROD
        assert settings.default_dialect == Dialect.POSTGRES

    def test_case_insensitive(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("recon_structured_logging", "true")
        assert Settings().structured_logging is True

    def test_invalid_dialect_rejected(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("RECON_DEFAULT_DIALECT", "oracle")
        with pytest.raises(ValueError):
            Settings()


# ---------------------------------------------------------------------------
# load_settings
# ---------------------------------------------------------------------------


class TestLoadSettings:
    def test_overrides(self):
        settings = load_settings(default_dialect=Dialect.REDSHIFT, debug=True)
        assert settings.default_dialect == Dialect.REDSHIFT
        assert settings.debug is True

    def test_returns_settings_instance(self):
        assert isinstance(load_settings(), Settings)
