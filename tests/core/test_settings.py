"""Tests for geospine.core.settings.

Covers:
- Defaults
- Environment variable override with the GEOSPINE_ prefix
- Field validation
- Cached accessor
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from geospine.core.settings import GeoSpineSettings, get_settings


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path, monkeypatch):
    """Keep a developer's .env out of the tests."""
    monkeypatch.chdir(tmp_path)


class TestDefaults:
    def test_defaults(self):
        s = GeoSpineSettings()
        assert s.log_level == "INFO"
        assert s.log_format == "auto"
        assert s.default_field == "location"
        assert s.on_failure == "abort"

    def test_auto_format_means_detect(self):
        assert GeoSpineSettings().json_logs is None


class TestEnvOverride:
    def test_prefixed_env(self, monkeypatch):
        monkeypatch.setenv("GEOSPINE_DEFAULT_FIELD", "shape")
        monkeypatch.setenv("GEOSPINE_ON_FAILURE", "skip")
        monkeypatch.setenv("GEOSPINE_LOG_FORMAT", "json")
        s = GeoSpineSettings()
        assert s.default_field == "shape"
        assert s.on_failure == "skip"
        assert s.json_logs is True

    def test_unprefixed_env_ignored(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_FIELD", "shape")
        assert GeoSpineSettings().default_field == "location"

    def test_log_level_normalized(self, monkeypatch):
        monkeypatch.setenv("GEOSPINE_LOG_LEVEL", "debug")
        assert GeoSpineSettings().log_level == "DEBUG"

    def test_env_file(self, tmp_path):
        (tmp_path / ".env").write_text("GEOSPINE_DEFAULT_FIELD=geo\n")
        assert GeoSpineSettings().default_field == "geo"


class TestValidation:
    def test_unknown_log_level(self):
        with pytest.raises(PydanticValidationError):
            GeoSpineSettings(log_level="LOUD")

    def test_empty_default_field(self):
        with pytest.raises(PydanticValidationError):
            GeoSpineSettings(default_field="")

    def test_unknown_failure_policy(self):
        with pytest.raises(PydanticValidationError):
            GeoSpineSettings(on_failure="retry")

    def test_console_format(self):
        assert GeoSpineSettings(log_format="console").json_logs is False


class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()

    def test_cache_clear_rereads_env(self, monkeypatch):
        get_settings()
        monkeypatch.setenv("GEOSPINE_DEFAULT_FIELD", "shape")
        get_settings.cache_clear()
        assert get_settings().default_field == "shape"
