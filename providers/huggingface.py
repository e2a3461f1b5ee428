"""
Hugging Face Inference Provider

Calls the Hugging Face Inference API for an instruct-tuned text-generation
model, authenticating with a bearer token. The inference API returns a list
of `{"generated_text": ...}` objects; the first element's text is re-wrapped
into the Gemini-style shape so the frontend reads it from the same path.

A 503 from the inference API means the model is still being loaded onto a
worker. That status is passed through with a message asking the user to
retry shortly.
"""

from typing import Any, Optional

from providers.base import SummaryProvider
from providers.prompts import build_instruct_prompt
from shared.errors import UpstreamError
from shared.models import GenerationResponse, SummaryRequest

HF_INFERENCE_BASE = "https://api-inference.huggingface.co/models"
HF_DEFAULT_MODEL = "mistralai/Mistral-7B-Instruct-v0.2"

NO_SUMMARY_TEXT = "No summary was generated."
MODEL_LOADING_MESSAGE = "The AI model is currently loading, please try again in 20-30 seconds."


class HuggingFaceProvider(SummaryProvider):
    """Adapter for the Hugging Face text-generation inference endpoint."""

    credential_label = "API token"

    @property
    def name(self) -> str:
        return "huggingface"

    @property
    def display_name(self) -> str:
        return "Hugging Face"

    @property
    def default_model(self) -> str:
        return HF_DEFAULT_MODEL

    def build_url(self) -> str:
        return f"{HF_INFERENCE_BASE}/{self.model}"

    def build_headers(self) -> dict[str, str]:
        headers = super().build_headers()
        headers["Authorization"] = f"Bearer {self.config.credential}"
        return headers

    def build_payload(self, request: SummaryRequest) -> dict[str, Any]:
        prompt = build_instruct_prompt(self.system_instruction(), self.user_prompt(request))
        return {
            "inputs": prompt,
            "parameters": {
                "max_new_tokens": self.config.max_new_tokens,
                "temperature": self.config.temperature,
                "return_full_text": False,
            },
        }

    def upstream_error(self, status_code: int) -> UpstreamError:
        if status_code == 503:
            return UpstreamError(503, MODEL_LOADING_MESSAGE)
        return super().upstream_error(status_code)

    def normalize(self, data: Any) -> dict[str, Any]:
        text = _first_generated_text(data) or NO_SUMMARY_TEXT
        return GenerationResponse.from_text(text).to_wire()


def _first_generated_text(data: Any) -> Optional[str]:
    """Pull `generated_text` from the first result, if there is one."""
    if isinstance(data, list):
        data = data[0] if data else None
    if isinstance(data, dict):
        text = data.get("generated_text")
        if isinstance(text, str):
            return text
    return None
