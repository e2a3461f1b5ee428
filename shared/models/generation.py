"""
Pydantic Models for the Normalized Generation Response

The frontend reads exactly one path from every successful response:

    candidates[0].content.parts[0].text

This is the shape the Gemini generateContent API returns natively. Providers
with a different native shape re-wrap their output into these models before
the body leaves the proxy, so the frontend never needs to know which
upstream produced a summary.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class Part(BaseModel):
    """A single text part of a generated message."""

    text: str


class Content(BaseModel):
    """A role-tagged message made of one or more parts."""

    parts: List[Part]
    role: str = "model"


class Candidate(BaseModel):
    """One generated candidate, with an optional grounding block."""

    model_config = ConfigDict(populate_by_name=True)

    content: Content
    grounding_metadata: Dict[str, Any] = Field(
        default_factory=dict,
        alias="groundingMetadata",
        description="Search grounding details. Empty for providers without grounding."
    )


class GenerationResponse(BaseModel):
    """Response body contract shared by every provider."""

    candidates: List[Candidate] = Field(min_length=1)

    @classmethod
    def from_text(cls, text: str) -> GenerationResponse:
        """Wrap plain generated text in the shared response shape."""
        return cls(candidates=[Candidate(content=Content(parts=[Part(text=text)]))])

    @property
    def text(self) -> str:
        """The text the frontend displays."""
        return self.candidates[0].content.parts[0].text

    def to_wire(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys the frontend expects."""
        return self.model_dump(by_alias=True)
