"""
API key check for the evaluation routes.
"""

from typing import Optional
from fastapi import Security, HTTPException
from fastapi.security import APIKeyHeader

from .config import settings

api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


def require_api_key(api_key: Optional[str] = Security(api_key_header)) -> Optional[str]:
    """Reject requests without a configured key; open when no keys are configured."""
    if not settings.requires_api_key:
        return api_key
    if api_key not in settings.API_KEYS:
        raise HTTPException(status_code=401, detail="Invalid or missing API key")
    return api_key
