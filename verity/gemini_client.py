"""Gemini client construction."""

import logging
from typing import Optional

from google import genai
from google.genai import types

from .config import Settings, load_settings

logger = logging.getLogger(__name__)

_client: Optional[genai.Client] = None


def create_client(settings: Settings) -> genai.Client:
    """Create a Gemini client for the configured key and optional timeout."""
    http_options = None
    if settings.timeout_ms:
        http_options = types.HttpOptions(timeout=settings.timeout_ms)
    return genai.Client(api_key=settings.api_key, http_options=http_options)


def get_client() -> genai.Client:
    """
    Shared client, created on first use from load_settings().
    Raises ConfigurationError if the API key is not configured.
    """
    global _client
    if _client is None:
        settings = load_settings()
        _client = create_client(settings)
        logger.info("Gemini client initialised (model=%s)", settings.model)
    return _client
