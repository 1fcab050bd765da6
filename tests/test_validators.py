"""
Tests for request and settings validation.
"""

import pytest
from config import Settings
from validators import (
    InvalidRequest,
    ValidationError,
    validate_request,
    validate_settings,
    MAX_TEXT_LENGTH
)


def test_valid_request():
    validate_request("hello", "en", "es")
    validate_request("x" * MAX_TEXT_LENGTH, "en", "es")


@pytest.mark.parametrize("text", ["", "   ", "\n\t", None])
def test_empty_text_rejected(text):
    with pytest.raises(InvalidRequest):
        validate_request(text, "en", "es")


def test_oversized_text_rejected():
    with pytest.raises(InvalidRequest) as exc:
        validate_request("x" * (MAX_TEXT_LENGTH + 1), "en", "es")
    assert "5000" in str(exc.value)


def test_unknown_language_rejected():
    with pytest.raises(InvalidRequest):
        validate_request("hello", "en", "xx")
    with pytest.raises(InvalidRequest):
        validate_request("hello", "klingon", "es")


def test_same_language_is_allowed():
    """Test identical languages are left to the translator's shortcut."""
    validate_request("hello", "de", "de")


def test_invalid_request_is_validation_error():
    assert issubclass(InvalidRequest, ValidationError)


def test_validate_settings_defaults():
    assert validate_settings(Settings()) == []


def test_validate_settings_errors():
    settings = Settings(provider="babelfish", api_url="ftp://example.com", timeout=0, rate_limit_requests=0)
    errors = validate_settings(settings)
    assert len(errors) == 4


def test_validate_settings_private_host():
    assert validate_settings(Settings(provider="libretranslate", api_url="http://localhost:5000")) != []
    assert validate_settings(Settings(
        provider="libretranslate",
        api_url="http://localhost:5000",
        allow_private_hosts=True
    )) == []
