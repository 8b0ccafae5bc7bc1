"""Health routes."""

from fastapi import APIRouter

from pksuid.utils.timestamp import format_timestamp

router = APIRouter(prefix="/api/v1", tags=["health"])


@router.get("/health")
async def health():
    """Lightweight liveness check."""
    return {
        "status": "ok",
        "timestamp": format_timestamp(),
    }
