"""Tests for environment-backed settings."""

import pytest
from pydantic import ValidationError

from portal_media_sync.config import MediaSyncSettings, load_settings

ENV_VARS = [
    "PORTAL_MANAGEMENT_ENDPOINT",
    "PORTAL_PUBLISH_ENDPOINT",
    "PORTAL_TOKEN",
    "PORTAL_ID",
    "PORTAL_KEY",
    "PORTAL_TOKEN_EXPIRES_IN",
    "PORTAL_VERIFY_SSL",
    "PORTAL_HTTP_TIMEOUT",
    "PORTAL_MEDIA_FOLDER",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)


class TestDefaults:
    def test_defaults_without_environment(self):
        settings = load_settings()
        assert settings == MediaSyncSettings()
        assert settings.token_expires_in == 3600
        assert settings.verify_ssl is True
        assert settings.media_folder == "./media"


class TestEnvironment:
    def test_values_are_read(self, monkeypatch):
        monkeypatch.setenv("PORTAL_MANAGEMENT_ENDPOINT", "p.management.azure-api.net")
        monkeypatch.setenv("PORTAL_ID", "integration")
        monkeypatch.setenv("PORTAL_KEY", "secret")
        monkeypatch.setenv("PORTAL_TOKEN_EXPIRES_IN", "600")
        monkeypatch.setenv("PORTAL_HTTP_TIMEOUT", "2.5")

        settings = load_settings()

        assert settings.management_endpoint == "p.management.azure-api.net"
        assert settings.identifier == "integration"
        assert settings.key == "secret"
        assert settings.token_expires_in == 600
        assert settings.http_timeout == 2.5

    @pytest.mark.parametrize(("raw", "expected"), [("false", False), ("0", False), ("TRUE", True), ("yes", True)])
    def test_verify_ssl_flag(self, monkeypatch, raw, expected):
        monkeypatch.setenv("PORTAL_VERIFY_SSL", raw)
        assert load_settings().verify_ssl is expected

    def test_invalid_number_raises(self, monkeypatch):
        monkeypatch.setenv("PORTAL_HTTP_TIMEOUT", "soon")
        with pytest.raises(ValidationError):
            load_settings()

    def test_non_positive_expiry_raises(self, monkeypatch):
        monkeypatch.setenv("PORTAL_TOKEN_EXPIRES_IN", "0")
        with pytest.raises(ValidationError):
            load_settings()


class TestOverrides:
    def test_overrides_win_over_environment(self, monkeypatch):
        monkeypatch.setenv("PORTAL_TOKEN", "from-env")
        assert load_settings(token="from-cli").token == "from-cli"

    def test_none_overrides_are_ignored(self, monkeypatch):
        monkeypatch.setenv("PORTAL_TOKEN", "from-env")
        monkeypatch.setenv("PORTAL_VERIFY_SSL", "false")

        settings = load_settings(token=None, verify_ssl=None)

        assert settings.token == "from-env"
        assert settings.verify_ssl is False
