"""
Health Check API v1 Endpoints

System health and status monitoring endpoints.
"""

from datetime import datetime, timezone
from typing import Dict, Any
from fastapi import APIRouter

from app.core.config import get_settings
from app.core.container import get_container
from app.utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("/")
async def health_check() -> Dict[str, Any]:
    """Basic health check endpoint with a database probe."""
    settings = get_settings()
    db_manager = get_container().db_manager

    database_ok = db_manager is not None and await db_manager.health_check()
    if not database_ok:
        logger.warning("Health check reports database unavailable")

    return {
        "status": "healthy" if database_ok else "degraded",
        "app_name": settings.APP_NAME,
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
        "services": {
            "api": "healthy",
            "database": "healthy" if database_ok else "unavailable",
        },
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
