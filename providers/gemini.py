"""
Gemini Provider

Calls the Google generative-language API `generateContent` method with
Google Search grounding enabled. The API key travels as the `key` query
parameter. A successful body already matches the shared response contract
and is forwarded unmodified, grounding metadata included.
"""

from typing import Any

from providers.base import SummaryProvider
from shared.models import SummaryRequest

GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta/models"
GEMINI_DEFAULT_MODEL = "gemini-2.5-flash-preview-09-2025"


class GeminiProvider(SummaryProvider):
    """Adapter for the Gemini generateContent endpoint."""

    @property
    def name(self) -> str:
        return "gemini"

    @property
    def display_name(self) -> str:
        return "Google"

    @property
    def default_model(self) -> str:
        return GEMINI_DEFAULT_MODEL

    def build_url(self) -> str:
        return f"{GEMINI_API_BASE}/{self.model}:generateContent"

    def build_params(self) -> dict[str, str]:
        return {"key": self.config.credential or ""}

    def build_payload(self, request: SummaryRequest) -> dict[str, Any]:
        # The persona is sent as a trailing model-role turn after the user turn
        user_turn = {
            "role": "user",
            "parts": [{"text": self.user_prompt(request)}],
        }
        system_turn = {
            "role": "model",
            "parts": [{"text": self.system_instruction()}],
        }
        return {
            "contents": [user_turn, system_turn],
            "tools": [{"google_search": {}}],
        }

    def normalize(self, data: Any) -> dict[str, Any]:
        return data
