"""Health and AI status routes."""

from fastapi import APIRouter

from ..ai_status import get_ai_status
from ..schemas import AIStatusResponse

router = APIRouter()


@router.get("/health")
def health() -> dict:
    """Liveness check."""
    return {"status": "ok"}


@router.get("/ai-status", response_model=AIStatusResponse)
def ai_status() -> AIStatusResponse:
    """Availability of the remote suggestion provider (cached)."""
    return AIStatusResponse(**get_ai_status())
