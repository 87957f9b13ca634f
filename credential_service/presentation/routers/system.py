"""System endpoints (health)."""

from fastapi import APIRouter

router = APIRouter(tags=["System"])


@router.get("/health", summary="Liveness check")
async def health() -> dict[str, str]:
    return {"status": "healthy"}
