"""Tests for the exception hierarchy."""
from nasa_api.errors import (
    ConfigError,
    DecodeError,
    NASAAPIError,
    NetworkError,
    RemoteError,
    ValidationError,
)


def test_all_errors_share_base():
    for cls in (ConfigError, ValidationError, NetworkError, DecodeError, RemoteError):
        assert issubclass(cls, NASAAPIError)
    assert issubclass(NASAAPIError, RuntimeError)


def test_validation_error_is_value_error():
    assert issubclass(ValidationError, ValueError)


def test_remote_error_attributes():
    exc = RemoteError(429, "https://api.nasa.gov/planetary/apod?api_key=***", {"error": {"code": "OVER_RATE_LIMIT"}})
    assert exc.status_code == 429
    assert exc.payload == {"error": {"code": "OVER_RATE_LIMIT"}}
    assert "429" in str(exc)


def test_decode_error_attributes():
    exc = DecodeError("bad body", status_code=200, body="<html>")
    assert exc.status_code == 200
    assert exc.body == "<html>"
    assert str(exc) == "bad body"
