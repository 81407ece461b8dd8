"""Tests for voteinfo settings."""

import pytest

from voteinfo.infrastructure.config.settings import (
    Settings,
    get_settings,
    reload_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    def test_defaults_point_at_opendata_catalog(self, monkeypatch):
        monkeypatch.delenv("VOTEINFO_NATIONAL_CATALOG_URL", raising=False)

        settings = Settings(_env_file=None)

        assert settings.NATIONAL_CATALOG_URL.startswith(
            "https://ckan.opendata.swiss/api/3/action/package_show?id="
        )
        assert "eidgenoessischen" in settings.NATIONAL_CATALOG_URL
        assert "kantonalen" in settings.CANTONAL_CATALOG_URL
        assert settings.HTTP_TIMEOUT == 30.0
        assert settings.LOG_FORMAT == "console"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("VOTEINFO_CANTONAL_CATALOG_URL", "https://example.org/c")
        monkeypatch.setenv("VOTEINFO_HTTP_TIMEOUT", "5")
        monkeypatch.setenv("VOTEINFO_LOG_FORMAT", "json")

        settings = Settings(_env_file=None)

        assert settings.CANTONAL_CATALOG_URL == "https://example.org/c"
        assert settings.HTTP_TIMEOUT == 5.0
        assert settings.LOG_FORMAT == "json"

    def test_invalid_log_format_rejected(self, monkeypatch):
        monkeypatch.setenv("VOTEINFO_LOG_FORMAT", "xml")

        with pytest.raises(ValueError):
            Settings(_env_file=None)


class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()

    def test_reload_reads_environment_again(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("VOTEINFO_LOG_LEVEL", "DEBUG")

        reloaded = reload_settings()

        assert reloaded is not first
        assert reloaded.LOG_LEVEL == "DEBUG"
