"""Usage banner and health check endpoints for the YouTube RSS proxy."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

USAGE_BANNER = "YouTube RSS Proxy is running. Use /api/rss?channel_id=..."

router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse)
async def usage():
    """Plaintext banner describing how to use the proxy."""
    return USAGE_BANNER


@router.get("/healthz")
async def health_check():
    """
    Health check endpoint.

    Returns:
        A simple status object indicating the service is healthy
    """
    return {"ok": True}


@router.get("/readyz")
async def readiness_check():
    """
    Readiness check endpoint.

    Returns:
        A simple status object indicating the service is ready to serve requests
    """
    return {"ok": True}
