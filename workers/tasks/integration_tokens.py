"""
Integration Token Tasks - keep third-party access tokens warm
"""
import logging
import os
from celery import shared_task
import httpx

logger = logging.getLogger(__name__)

# API base URL for triggering the refresh
API_BASE_URL = os.getenv("API_BASE_URL", "http://api:8000")
INTERNAL_TASK_TOKEN = os.getenv("INTERNAL_TASK_TOKEN", "")


@shared_task(name="tasks.integration_tokens.refresh_amadeus_token")
def refresh_amadeus_token():
    """
    Ask the API to fetch a fresh Amadeus token.

    The refresh runs inside the API process so its in-memory cache is the one
    that gets updated. Failures are logged and left for the next beat tick.
    """
    logger.info("Starting Amadeus token refresh")

    headers = {"X-Internal-Token": INTERNAL_TASK_TOKEN} if INTERNAL_TASK_TOKEN else {}
    try:
        response = httpx.post(
            f"{API_BASE_URL}/api/internal/integrations/amadeus/token/refresh",
            headers=headers,
            timeout=30.0
        )
        response.raise_for_status()
        result = response.json()
        logger.info(f"Amadeus token refreshed, expires at {result.get('expires_at')}")
        return {"status": "refreshed", **result}
    except Exception as e:
        logger.error(f"Failed to refresh Amadeus token: {e}")
        return {"status": "failed", "error": str(e)}
