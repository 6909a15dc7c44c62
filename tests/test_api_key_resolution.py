from unittest.mock import MagicMock

import pytest

from core import ai_client
from core.ai_client import get_client, resolve_api_key
from core.errors import ConfigurationError


def test_resolve_api_key_prefers_explicit(monkeypatch):
    monkeypatch.setenv("API_KEY", "env-value")
    assert resolve_api_key(" explicit ", "API_KEY") == "explicit"


def test_resolve_api_key_falls_back_to_first_non_empty_env(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "  ")
    monkeypatch.setenv("GOOGLE_API_KEY", "google-value")
    assert resolve_api_key(None, "API_KEY", "GEMINI_API_KEY", "GOOGLE_API_KEY") == "google-value"


def test_resolve_api_key_returns_empty_when_nothing_set():
    assert resolve_api_key(None, "API_KEY") == ""


def test_get_client_without_key_raises_every_time(monkeypatch):
    fake_client_cls = MagicMock()
    monkeypatch.setattr("google.genai.Client", fake_client_cls)

    for _ in range(2):
        with pytest.raises(ConfigurationError):
            get_client()

    fake_client_cls.assert_not_called()
    assert ai_client._client is None


def test_get_client_initializes_once(monkeypatch):
    fake_client_cls = MagicMock()
    monkeypatch.setattr("google.genai.Client", fake_client_cls)
    monkeypatch.setenv("API_KEY", "secret")

    first = get_client()
    second = get_client()

    assert first is second
    fake_client_cls.assert_called_once_with(api_key="secret")
