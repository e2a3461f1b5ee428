"""
VidhiDesk Upstream Providers

This package contains one adapter per generative-text API:

  1. GeminiProvider - Google generative-language API, body forwarded as-is
  2. HuggingFaceProvider - Hugging Face inference API, re-wrapped to Gemini shape

The active provider is chosen by server configuration (VIDHIDESK_PROVIDER),
never by the client.

Usage:
    from providers import get_provider

    provider = get_provider(ProxyConfig.from_env())
    body = await provider.generate(summary_request, http_client)
"""

from typing import Optional

from shared.config import ProxyConfig
from shared.errors import ConfigurationError

from .base import SummaryProvider
from .gemini import GeminiProvider
from .huggingface import HuggingFaceProvider

PROVIDERS: dict[str, type[SummaryProvider]] = {
    "gemini": GeminiProvider,
    "huggingface": HuggingFaceProvider,
}


def get_provider(config: Optional[ProxyConfig] = None) -> SummaryProvider:
    """
    Instantiate the configured provider.

    Raises:
        ConfigurationError: the configured provider name is unknown
    """
    config = config or ProxyConfig.from_env()
    provider_cls = PROVIDERS.get(config.provider)
    if provider_cls is None:
        raise ConfigurationError(f"Provider '{config.provider}' not configured.")
    return provider_cls(config)


__all__ = [
    "PROVIDERS",
    "SummaryProvider",
    "GeminiProvider",
    "HuggingFaceProvider",
    "get_provider",
]
