"""
VidhiDesk Web API Package

FastAPI-based proxy between the VidhiDesk frontend and the configured
generative-text provider.

Usage:
    # Start the server
    uvicorn api.main:app --reload

    # Or via entry point
    vidhidesk-api
"""

from api.main import app
from api.models import ErrorResponse, HealthResponse

__all__ = [
    "app",
    "ErrorResponse",
    "HealthResponse",
]
