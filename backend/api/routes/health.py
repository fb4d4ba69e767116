"""
Health check endpoints.

Provides endpoints for monitoring application health.
"""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


@router.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def root() -> str:
    """Liveness text for quick manual checks."""
    return "Server is running"


@router.get("/api/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=request.app.version)
