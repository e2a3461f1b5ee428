"""
VidhiDesk Base Provider Class

This module defines the adapter architecture for upstream generative-text
APIs. Each provider inherits from this base and supplies only what differs
between APIs: URL, auth placement, payload shape and response shape.

REQUEST FLOW (one linear pass, no retries):
  1. Check the credential is configured (no outbound call otherwise)
  2. Build URL, headers and provider-specific payload
  3. POST once to the fixed upstream URL
  4. Map a non-success status to UpstreamError (status passed through)
  5. Parse JSON and normalize it to the shared response contract

Transport failures and unparsable bodies become InternalProxyError. The
underlying cause is logged here and never returned to the caller.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx

from providers.prompts import PromptStyle, build_system_instruction, build_user_prompt, resolve_style
from shared.config import ProxyConfig
from shared.errors import ConfigurationError, InternalProxyError, UpstreamError
from shared.models import SummaryRequest


class SummaryProvider(ABC):
    """
    Base class for upstream summary providers.

    Subclasses implement:
      - `name`: registry key (e.g., 'gemini')
      - `display_name`: provider name used in public error messages
      - `default_model`: model used when no server-side override is set
      - `build_url()`, `build_payload()`, `normalize()`

    The base class provides:
      - Credential check via `ensure_configured()`
      - The single outbound call and error mapping via `generate()`
      - Logging via `self.logger`
    """

    credential_label: str = "API key"

    def __init__(self, config: Optional[ProxyConfig] = None):
        """
        Initialize the provider.

        Args:
            config: Proxy configuration (loaded from the environment if not provided)
        """
        self.config = config or ProxyConfig.from_env()
        self.logger = logging.getLogger(f"vidhidesk.providers.{self.name}")

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider identifier (e.g., 'gemini', 'huggingface')."""
        pass

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable provider name (e.g., 'Google')."""
        pass

    @property
    @abstractmethod
    def default_model(self) -> str:
        pass

    @property
    def model(self) -> str:
        return self.config.model or self.default_model

    @property
    def prompt_style(self) -> PromptStyle:
        return resolve_style(self.config.prompt_style)

    @property
    def not_configured_message(self) -> str:
        return f"{self.credential_label} not configured."

    @abstractmethod
    def build_url(self) -> str:
        """Fixed upstream endpoint for the configured model."""
        pass

    @abstractmethod
    def build_payload(self, request: SummaryRequest) -> dict[str, Any]:
        """Provider-specific JSON body for one summary request."""
        pass

    @abstractmethod
    def normalize(self, data: Any) -> dict[str, Any]:
        """
        Reshape a parsed upstream body into the response sent to the caller.

        Args:
            data: Parsed JSON body of a successful upstream response

        Returns:
            A body satisfying `candidates[0].content.parts[0].text`
        """
        pass

    def build_headers(self) -> dict[str, str]:
        return {"Content-Type": "application/json"}

    def build_params(self) -> dict[str, str]:
        """Query parameters added to the upstream URL."""
        return {}

    def system_instruction(self) -> str:
        return build_system_instruction(self.prompt_style)

    def user_prompt(self, request: SummaryRequest) -> str:
        return build_user_prompt(request)

    def upstream_error(self, status_code: int) -> UpstreamError:
        """Map a non-success upstream status to the error returned to the caller."""
        return UpstreamError(status_code, f"Error from {self.display_name} API.")

    def ensure_configured(self) -> None:
        if not self.config.credential:
            self.logger.error(f"{self.config.credential_env_var} is not set")
            raise ConfigurationError(self.not_configured_message)

    async def generate(self, request: SummaryRequest, client: httpx.AsyncClient) -> dict[str, Any]:
        """
        Perform the single upstream call for a validated request.

        Args:
            request: Complete summary request
            client: HTTP client used for the outbound call

        Returns:
            Normalized response body

        Raises:
            ConfigurationError: credential is missing (no call is made)
            UpstreamError: upstream answered with a non-success status
            InternalProxyError: transport failure or unparsable body
        """
        self.ensure_configured()

        payload = self.build_payload(request)

        self.logger.info(f"Requesting summary of '{request.law_name}' from {self.display_name} ({self.model})")

        try:
            response = await client.post(
                self.build_url(),
                params=self.build_params(),
                headers=self.build_headers(),
                json=payload,
            )
        except httpx.HTTPError as e:
            self.logger.error(f"{self.display_name} API request failed: {e!r}")
            raise InternalProxyError() from e

        if not response.is_success:
            self.logger.error(f"{self.display_name} API Error ({response.status_code}): {response.text}")
            raise self.upstream_error(response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            self.logger.error(f"{self.display_name} API returned invalid JSON: {e}")
            raise InternalProxyError() from e

        return self.normalize(data)
