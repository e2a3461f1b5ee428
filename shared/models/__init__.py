"""
VidhiDesk Shared Pydantic Models

Models are organized by purpose:

  - summary.py: Inbound form fields from the frontend
  - generation.py: Normalized response shape returned to the frontend

Usage:
    from shared.models import SummaryRequest, GenerationResponse
"""

# Inbound request
from .summary import SummaryRequest

# Normalized response
from .generation import (
    Candidate,
    Content,
    GenerationResponse,
    Part,
)

__all__ = [
    # Request
    "SummaryRequest",
    # Response
    "Candidate",
    "Content",
    "GenerationResponse",
    "Part",
]
