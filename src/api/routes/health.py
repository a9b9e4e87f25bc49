"""
Health endpoint
===============

GET /health -- liveness probe for the orchestrator; plain ``Healthy``.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_class=PlainTextResponse,
    summary="Health check",
)
async def health():
    return "Healthy"
