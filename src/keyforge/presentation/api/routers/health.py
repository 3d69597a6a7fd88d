"""Health check router."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health", tags=["Health"])
async def health_check() -> dict:
    """Health check endpoint.

    Unversioned for load balancer/monitoring compatibility.
    """
    return {"status": "ok"}
