"""
Health check router.

This router provides health check endpoints for monitoring and load balancers.
"""

import logging

from fastapi import APIRouter, Depends

from api.deps import get_settings
from backend.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health():
    """
    Simple liveness endpoint.

    Returns:
        dict: Status indicator for health checks
    """
    return {"status": "ok"}


@router.get("/health/config")
def health_config(settings: Settings = Depends(get_settings)):
    """
    Report which external collaborators are configured. Never returns secrets.
    """
    return {
        "status": "ok",
        "environment": settings.environment,
        "database_configured": bool(settings.supabase_url and settings.supabase_key),
        "llm_configured": bool(settings.groq_api_key),
        "helicone_enabled": settings.helicone_enabled,
    }
