"""
Health Check Endpoints
"""
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import text
from typing import Optional
import time

from app.config import Settings
from app.dependencies import get_amadeus_provider, get_app_settings, get_supabase_auth_provider
from app.utils.database import get_db

router = APIRouter()

# Database probe result is reused for HEALTH_CHECK_MIN_INTERVAL_MS
_db_check_at: float = 0.0
_db_status: Optional[dict] = None


@router.get("/health")
async def health_check(settings: Settings = Depends(get_app_settings)):
    """Basic health check"""
    return {"status": "healthy", "service": settings.APP_NAME, "version": settings.APP_VERSION}


@router.get("/health/ready")
async def readiness_check(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """
    Readiness check - verifies the database and reports provider status
    """
    global _db_check_at, _db_status

    now = time.monotonic()
    if _db_status is None or (now - _db_check_at) * 1000 >= settings.HEALTH_CHECK_MIN_INTERVAL_MS:
        try:
            await db.execute(text("SELECT 1"))
            _db_status = {"status": "pass"}
        except Exception as e:
            _db_status = {"status": "fail", "error": str(e)}
        _db_check_at = now

    providers = {
        provider.name: provider.status.value if provider.is_configured else "unconfigured"
        for provider in (get_amadeus_provider(), get_supabase_auth_provider())
    }

    return {
        "status": "ready" if _db_status["status"] == "pass" else "degraded",
        "checks": {
            "database": _db_status,
            "providers": providers,
        },
    }


@router.get("/health/live")
async def liveness_check():
    """Liveness check - is the service running"""
    return {"status": "alive"}


@router.get("/api/trial", response_class=PlainTextResponse)
async def trial():
    """Diagnostic route with a static payload"""
    return "everything okay"
