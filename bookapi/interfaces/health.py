"""Liveness endpoint reporting the running Book API version."""

from fastapi import APIRouter

from bookapi.core.config import settings
from bookapi.interfaces.books.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service status",
    description="Answers 200 while the process is up, with the deployed version.",
)
def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=settings.version)
