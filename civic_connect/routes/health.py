"""
Health check endpoints.
Used for monitoring, deployment readiness checks, and basic connectivity tests.
"""

from fastapi import APIRouter
from civic_connect.core.settings import settings
from civic_connect.services.ai_plugin import get_text_generator
from datetime import datetime, timezone


router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
async def health_check():
    """
    Basic health check endpoint.
    Returns 200 if service is running.
    """
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@router.get("/ai")
async def ai_health():
    """
    AI backend availability.
    Always 200: a missing provider only means helpers return defaults.
    """
    generator = get_text_generator()
    return {
        "ai_enabled": settings.AI_ENABLED,
        "available": generator.is_enabled(),
        "providers": [p.get_model_info()["name"] for p in generator.providers],
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
