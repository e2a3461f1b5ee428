"""
VidhiDesk Proxy Configuration

Process-wide settings for the summary proxy, read from environment variables
(a local `.env` file is loaded first when present).

Configuration is re-read on every request so that a credential added to the
environment takes effect without restarting the process. Nothing here is
ever written back.

CREDENTIALS:
  Each upstream provider names its credential with a purely symbolic
  environment variable (GEMINI_API_KEY, HF_API_TOKEN). Secret material
  never appears in code or in configuration key names.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Callable, Optional, TypeVar

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

NumberT = TypeVar("NumberT", int, float)

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

# Symbolic credential variable per provider
CREDENTIAL_ENV_VARS: dict[str, str] = {
    "gemini": "GEMINI_API_KEY",
    "huggingface": "HF_API_TOKEN",
}


def credential_env_var_for(provider: str) -> str:
    """Name of the environment variable holding a provider's credential."""
    return CREDENTIAL_ENV_VARS.get(provider, f"{provider.upper()}_API_KEY")


def _env_number(name: str, default: NumberT, cast: Callable[[str], NumberT]) -> NumberT:
    """Parse a numeric setting, keeping the default when the value is malformed."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}, using {default}")
        return default


def _env_log_level(name: str = "VIDHIDESK_LOG_LEVEL", default: str = "INFO") -> str:
    level = os.getenv(name, default).strip().upper()
    if level not in LOG_LEVELS:
        logger.warning(f"Ignoring invalid {name}={level!r}, using {default}")
        return default
    return level


@dataclass
class ProxyConfig:
    """Configuration for the summary proxy."""

    # Upstream selection
    provider: str = "gemini"
    model: Optional[str] = None  # None means the provider's default model
    credential: Optional[str] = field(default=None, repr=False)

    # Prompting
    prompt_style: str = "strict"

    # Generation parameters (inference-API providers only)
    max_new_tokens: int = 1024
    temperature: float = 0.7

    # Outbound HTTP
    upstream_timeout: float = 60.0

    # Logging
    log_level: str = "INFO"

    @property
    def credential_env_var(self) -> str:
        return credential_env_var_for(self.provider)

    @classmethod
    def from_env(cls) -> ProxyConfig:
        """
        Load configuration from environment variables.

        Malformed optional settings fall back to their defaults with a
        warning, so a bad value never turns a request into an unhandled
        error. A missing credential is left as None and reported per request.
        """
        provider = os.getenv("VIDHIDESK_PROVIDER", "gemini").strip().lower()

        return cls(
            provider=provider,
            model=os.getenv("VIDHIDESK_MODEL") or None,
            credential=os.getenv(credential_env_var_for(provider)) or None,
            prompt_style=os.getenv("VIDHIDESK_PROMPT_STYLE", "strict").strip().lower(),
            max_new_tokens=_env_number("VIDHIDESK_MAX_NEW_TOKENS", 1024, int),
            temperature=_env_number("VIDHIDESK_TEMPERATURE", 0.7, float),
            upstream_timeout=_env_number("VIDHIDESK_UPSTREAM_TIMEOUT", 60.0, float),
            log_level=_env_log_level(),
        )
