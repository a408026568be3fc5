"""Health check endpoint."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    """
    Liveness check.

    Does not contact the listing site; use the smoke test script for that.
    """
    return {"status": "ok", "service": "cartelera"}
