import logging

from lyrics_gateway import config
from lyrics_gateway.logging_setup import setup_logging


def test_genius_api_key_is_read_per_call(monkeypatch):
    monkeypatch.delenv("GENIUS_API_KEY", raising=False)
    assert config.genius_api_key() == ""
    monkeypatch.setenv("GENIUS_API_KEY", "  abc123 \n")
    assert config.genius_api_key() == "abc123"


def test_timeout_parsing():
    assert config._timeout_from_env("10") == 10.0
    assert config._timeout_from_env("0") is None
    assert config._timeout_from_env("soon") == 25.0


def test_log_level_env_override(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
    monkeypatch.setenv("LYRICS_GATEWAY_LOG_LEVEL", "warning")
    setup_logging(debug=True)
    assert calls["level"] == logging.WARNING

    monkeypatch.delenv("LYRICS_GATEWAY_LOG_LEVEL")
    setup_logging(debug=True)
    assert calls["level"] == logging.DEBUG
