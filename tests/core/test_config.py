"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from short_iron.core.config import EnvironmentType, Settings, URL_SAFE_CHARS


def make_settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


def test_defaults():
    settings = make_settings()

    assert settings.SHORT_URL_HOST == "short.fe"
    assert settings.URL_CODE_LENGTH == 10
    assert settings.URL_CODE_CHARS == URL_SAFE_CHARS
    assert len(URL_SAFE_CHARS) == 64


def test_environment_variables_override(monkeypatch):
    monkeypatch.setenv("SHORT_URL_HOST", "sho.rt")
    monkeypatch.setenv("url_code_length", "12")
    monkeypatch.setenv("ENVIRONMENT", "production")

    settings = make_settings()

    assert settings.SHORT_URL_HOST == "sho.rt"
    assert settings.URL_CODE_LENGTH == 12
    assert settings.ENVIRONMENT is EnvironmentType.PRODUCTION


def test_trailing_slashes_are_stripped():
    settings = make_settings(SHORT_URL_HOST="short.fe/", API_PREFIX="/api/")

    assert settings.SHORT_URL_HOST == "short.fe"
    assert settings.API_PREFIX == "/api"


def test_log_level_is_uppercased():
    assert make_settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"


@pytest.mark.parametrize("overrides", [
    {"URL_CODE_CHARS": "a"},
    {"URL_CODE_CHARS": "zzzz"},
    {"URL_CODE_LENGTH": 0},
    {"URL_CODE_MAX_ATTEMPTS": 0},
    {"PORT": 70000},
])
def test_invalid_values(overrides):
    with pytest.raises(ValidationError):
        make_settings(**overrides)
