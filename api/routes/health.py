"""
Health check endpoint.
"""

from fastapi import APIRouter
from datetime import datetime, timezone

from nft_evaluator import get_settings
from ..models import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        gateway=get_settings().IPFS_GATEWAY
    )
