"""Settings loader: environment variables and logging setup."""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigurationError

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    """Runtime configuration for the Gemini-backed analyzer."""

    api_key: str
    model: str = DEFAULT_MODEL
    timeout_ms: Optional[int] = None
    log_level: str = DEFAULT_LOG_LEVEL


def _parse_timeout(raw: str) -> Optional[int]:
    raw = (raw or "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"GEMINI_TIMEOUT_MS must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ConfigurationError("GEMINI_TIMEOUT_MS must be positive")
    return value


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from the environment (or the given mapping).
    Raises ConfigurationError when the API key is missing; callers treat
    that as fatal and must not start.
    """
    env = os.environ if env is None else env
    api_key = (env.get("GEMINI_API_KEY") or env.get("API_KEY") or "").strip()
    if not api_key:
        raise ConfigurationError("GEMINI_API_KEY environment variable is not set.")

    return Settings(
        api_key=api_key,
        model=(env.get("GEMINI_MODEL") or DEFAULT_MODEL).strip(),
        timeout_ms=_parse_timeout(env.get("GEMINI_TIMEOUT_MS", "")),
        log_level=(env.get("VERITY_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper(),
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure root logging once; later calls are no-ops."""
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
