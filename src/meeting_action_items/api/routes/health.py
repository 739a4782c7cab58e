"""Health check endpoint."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
async def health():
    """Liveness check; the service has no backing store to probe."""
    return {"status": "ok"}
