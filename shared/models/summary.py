"""
Pydantic Models for the Summary Request

The browser frontend submits four form fields. All four are plain strings
and all four are required; nothing else is checked. In particular the
difficulty, tone and length values are not restricted to a fixed set, so
any non-empty string is forwarded verbatim into the upstream prompt.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SummaryRequest(BaseModel):
    """
    Form input for POST /api/generate.

    Fields are declared optional so that an incomplete form can be parsed
    and reported as a single "missing parameters" condition rather than a
    per-field validation error. Use `missing_fields()` to check completeness.
    """

    model_config = ConfigDict(populate_by_name=True)

    law_name: Optional[str] = Field(
        default=None,
        alias="lawName",
        description="Name of the Indian law, act or amendment to summarize."
    )
    difficulty: Optional[str] = Field(
        default=None,
        description="Reading level requested, e.g. 'beginner' or 'expert'."
    )
    tone: Optional[str] = Field(
        default=None,
        description="Tone of the summary, e.g. 'formal' or 'conversational'."
    )
    length: Optional[str] = Field(
        default=None,
        description="Requested length, e.g. 'short' or 'detailed'."
    )

    def missing_fields(self) -> List[str]:
        """Return the wire names of required fields that are absent or empty."""
        values = {
            "lawName": self.law_name,
            "difficulty": self.difficulty,
            "tone": self.tone,
            "length": self.length,
        }
        return [name for name, value in values.items() if not value]

    def is_complete(self) -> bool:
        return not self.missing_fields()
