"""Process-wide, lazily created Gemini client."""

from __future__ import annotations

import logging
import os
import threading

from core.config import API_KEY_ENV_NAMES
from core.errors import MissingCredentialError

logger = logging.getLogger(__name__)

_client = None
_client_lock = threading.Lock()


def resolve_api_key(explicit: str | None, *env_names: str) -> str:
    """Return the explicit key if given, else the first non-empty env var."""
    if explicit and explicit.strip():
        return explicit.strip()
    for name in env_names:
        value = os.environ.get(name, "").strip()
        if value:
            return value
    return ""


def get_client():
    """Return the shared ``genai.Client``, creating it on first use.

    Raises MissingCredentialError while no API key is available. The failure
    leaves the accessor uninitialized, so nothing is cached until a key
    exists.
    """
    global _client

    if _client is not None:
        return _client

    with _client_lock:
        if _client is None:
            api_key = resolve_api_key(None, *API_KEY_ENV_NAMES)
            if not api_key:
                logger.error("Gemini API key not set (looked in %s)", ", ".join(API_KEY_ENV_NAMES))
                raise MissingCredentialError("API_KEY environment variable not set.")

            from google import genai

            _client = genai.Client(api_key=api_key)
            logger.info("Gemini client initialized")
    return _client
