"""Tests for environment-based settings."""

import pytest
from pydantic import ValidationError

from geoserver_rest import GeoServerRestClient
from geoserver_rest.config import GeoServerSettings, get_geoserver_settings


@pytest.fixture
def geoserver_env(monkeypatch):
    monkeypatch.setenv("GEOSERVER_URL", "https://maps.example.com/geoserver/rest")
    monkeypatch.setenv("GEOSERVER_USER", "admin")
    monkeypatch.setenv("GEOSERVER_PASSWORD", "geoserver")
    get_geoserver_settings.cache_clear()
    yield monkeypatch
    get_geoserver_settings.cache_clear()


def test_settings_from_environment(geoserver_env) -> None:
    geoserver_env.setenv("GEOSERVER_TIMEOUT", "30")
    geoserver_env.setenv("GEOSERVER_VERIFY_SSL", "false")

    settings = get_geoserver_settings()

    assert settings.url == "https://maps.example.com/geoserver/rest"
    assert settings.timeout == 30.0
    assert settings.verify_ssl is False
    assert get_geoserver_settings() is settings


def test_timeout_defaults_to_none(geoserver_env) -> None:
    assert get_geoserver_settings().timeout is None


def test_url_must_be_http(geoserver_env) -> None:
    geoserver_env.setenv("GEOSERVER_URL", "ftp://maps.example.com")

    with pytest.raises(ValidationError):
        get_geoserver_settings()


def test_timeout_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        GeoServerSettings(url="http://localhost", user="a", password="b", timeout=0)


def test_client_from_environment(geoserver_env) -> None:
    with GeoServerRestClient.from_settings() as grc:
        assert grc.url == "https://maps.example.com/geoserver/rest/"
