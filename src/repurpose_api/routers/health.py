"""Liveness endpoint."""

from fastapi import APIRouter

from repurpose_api.models.content import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health():
    """Static liveness check; touches no upstream service."""
    return HealthResponse(status="OK", message="Server is running")
