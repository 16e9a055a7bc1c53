"""
Internal Endpoints - hooks triggered by the Celery scheduler
"""
from fastapi import APIRouter, Depends, Header
from typing import Optional
import hmac
import logging

from app.config import Settings
from app.dependencies import get_amadeus_token_service, get_app_settings
from app.services.amadeus_auth import AmadeusTokenService
from app.services.providers.base import ProviderError
from app.utils.errors import UnauthorizedError, UpstreamError

router = APIRouter()
logger = logging.getLogger(__name__)


def require_internal_token(
    x_internal_token: Optional[str] = Header(None),
    settings: Settings = Depends(get_app_settings),
) -> None:
    expected = settings.INTERNAL_TASK_TOKEN
    if not expected:
        return
    if not x_internal_token or not hmac.compare_digest(x_internal_token, expected):
        raise UnauthorizedError("Invalid internal token")


@router.post("/integrations/amadeus/token/refresh", dependencies=[Depends(require_internal_token)])
async def refresh_amadeus_token(
    token_service: AmadeusTokenService = Depends(get_amadeus_token_service),
):
    """
    Force a new Amadeus token into this process's cache and the integration_tokens table
    """
    try:
        await token_service.refresh_now()
    except ProviderError as e:
        logger.error(f"Amadeus token refresh failed: {e}")
        raise UpstreamError(e.message)
    cached = token_service.cached
    return {
        "provider": token_service.provider_name,
        "expires_at": cached.expires_at.isoformat() if cached else None,
    }
