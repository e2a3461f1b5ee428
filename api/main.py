"""
VidhiDesk FastAPI Application

Secure proxy between the VidhiDesk browser frontend and a generative-text
API. The frontend never sees the provider credential; it posts the form
fields here and reads the summary from `candidates[0].content.parts[0].text`.

Provides endpoints for:
  - Generating a summary of an Indian law, act or amendment
  - Health checks
"""

import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.models import ErrorResponse, HealthResponse
from providers import get_provider
from shared.config import ProxyConfig
from shared.errors import InternalProxyError, MissingParametersError, SummaryProxyError
from shared.models import GenerationResponse, SummaryRequest

# Configure logging
logging.basicConfig(
    level=ProxyConfig.from_env().log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
# httpx logs full request URLs at INFO, which would include the Gemini key
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger("vidhidesk.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    config = ProxyConfig.from_env()
    logger.info(f"Starting VidhiDesk API server (provider: {config.provider})")
    if not config.credential:
        logger.warning(
            f"{config.credential_env_var} not set. Summary requests will fail until configured."
        )
    yield
    logger.info("Shutting down VidhiDesk API server")


# Create FastAPI app
app = FastAPI(
    title="VidhiDesk API",
    description="Summaries of Indian laws, acts and amendments",
    version="0.3.0",
    lifespan=lifespan,
)

# Configure CORS for frontend (configurable via environment)
cors_origins = os.environ.get("CORS_ORIGINS", "*").split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Error Rendering
# ============================================================================

@app.exception_handler(SummaryProxyError)
async def summary_proxy_error_handler(request: Request, exc: SummaryProxyError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render routing errors (405, 404) in the same `{"message": ...}` shape"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


# ============================================================================
# Dependencies
# ============================================================================

def get_config() -> ProxyConfig:
    """Read configuration at request time"""
    return ProxyConfig.from_env()


async def get_http_client(config: ProxyConfig = Depends(get_config)) -> AsyncIterator[httpx.AsyncClient]:
    """One outbound client per request, closed when the response is sent"""
    async with httpx.AsyncClient(timeout=config.upstream_timeout) as client:
        yield client


async def parse_summary_request(request: Request) -> SummaryRequest:
    """
    Parse and validate the form fields from the request body.

    Anything other than a JSON object carrying four non-empty strings is
    reported as missing parameters.
    """
    try:
        body = await request.json()
    except ValueError:
        body = None

    if not isinstance(body, dict):
        raise MissingParametersError()

    try:
        summary_request = SummaryRequest.model_validate(body)
    except ValidationError:
        raise MissingParametersError()

    if not summary_request.is_complete():
        missing = ", ".join(summary_request.missing_fields())
        logger.info(f"Rejected request with missing fields: {missing}")
        raise MissingParametersError()

    return summary_request


# ============================================================================
# API Endpoints
# ============================================================================

@app.post(
    "/api/generate",
    responses={
        200: {"model": GenerationResponse},
        400: {"model": ErrorResponse},
        405: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def generate(
    request: Request,
    config: ProxyConfig = Depends(get_config),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """
    Generate a Markdown summary of an Indian law.

    Body fields (all required, any non-empty string):
      - lawName
      - difficulty
      - tone
      - length

    Upstream error statuses are passed through with a generic message.
    """
    summary_request = await parse_summary_request(request)
    provider = get_provider(config)

    try:
        body = await provider.generate(summary_request, client)
    except SummaryProxyError:
        raise
    except Exception as e:
        logger.exception(f"Internal server error: {e}")
        raise InternalProxyError() from e

    return JSONResponse(status_code=200, content=body)


@app.get("/health", response_model=HealthResponse)
async def health_check(config: ProxyConfig = Depends(get_config)):
    """Health check endpoint"""
    return HealthResponse(status="healthy", timestamp=datetime.now(), provider=config.provider)


# ============================================================================
# Entry Point
# ============================================================================

def main():
    """Run the API server"""
    import uvicorn

    host = os.environ.get("VIDHIDESK_HOST", "0.0.0.0")
    port = int(os.environ.get("VIDHIDESK_PORT", "8000"))

    uvicorn.run(
        "api.main:app",
        host=host,
        port=port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
