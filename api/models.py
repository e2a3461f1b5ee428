"""
API Response Models

Pydantic models for the FastAPI endpoints. Successful summary responses are
documented by `shared.models.GenerationResponse`; every error response uses
the single-field `ErrorResponse` body.
"""

from datetime import datetime

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body of every non-success response"""

    message: str


class HealthResponse(BaseModel):
    """Response model for GET /health"""

    status: str
    timestamp: datetime
    provider: str
