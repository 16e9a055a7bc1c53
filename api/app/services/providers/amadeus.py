"""
Amadeus Hotel Provider - OAuth client-credentials grant and hotel search endpoints
https://developers.amadeus.com/
"""
from typing import Any, Dict, List, Optional, Tuple
import logging

import httpx

from app.config import settings
from .base import ExternalProvider, ProviderError

logger = logging.getLogger(__name__)

TOKEN_PATH = "/v1/security/oauth2/token"
HOTELS_BY_GEOCODE_PATH = "/v1/reference-data/locations/hotels/by-geocode"
HOTEL_OFFERS_PATH = "/v3/shopping/hotel-offers"


class AmadeusProvider(ExternalProvider):
    """
    Amadeus Self-Service API client.

    Host (sandbox or production) and credentials come from settings.
    Each call raises ProviderError on failure; callers decide whether to
    propagate or degrade.
    """

    name = "amadeus"
    token_timeout = 10.0
    search_timeout = 30.0

    def __init__(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(transport)
        self.client_id = client_id if client_id is not None else settings.AMADEUS_CLIENT_ID
        self.client_secret = client_secret if client_secret is not None else settings.AMADEUS_CLIENT_SECRET
        self.base_url = base_url or settings.AMADEUS_BASE_URL

    @property
    def is_configured(self) -> bool:
        """Check if Amadeus credentials are configured"""
        return bool(self.client_id and self.client_secret)

    async def fetch_access_token(self) -> Tuple[str, int]:
        """
        Run the client-credentials grant.

        Returns the bearer token and its reported lifetime in seconds.
        """
        if not self.is_configured:
            raise ProviderError(self.name, "Amadeus API credentials not configured")

        try:
            async with self.client(timeout=self.token_timeout) as client:
                response = await client.post(
                    f"{self.base_url}{TOKEN_PATH}",
                    data={
                        "grant_type": "client_credentials",
                        "client_id": self.client_id,
                        "client_secret": self.client_secret,
                    },
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            self.record_failure(e)
            raise ProviderError(self.name, f"HTTP {e.response.status_code}: {e.response.text}", e,
                                status_code=e.response.status_code)
        except (httpx.HTTPError, ValueError) as e:
            self.record_failure(e)
            raise ProviderError(self.name, str(e), e)

        token = data.get("access_token") if isinstance(data, dict) else None
        if not token:
            raise ProviderError(self.name, "Token response did not include an access_token")

        try:
            expires_in = int(data.get("expires_in") or 0)
        except (TypeError, ValueError):
            expires_in = 0

        self.record_success()
        return token, expires_in

    async def _get_data(self, path: str, token: str, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        try:
            async with self.client(timeout=self.search_timeout) as client:
                response = await client.get(
                    f"{self.base_url}{path}",
                    params=params,
                    headers={"Authorization": f"Bearer {token}"},
                )
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            self.record_failure(e)
            raise ProviderError(self.name, f"HTTP {e.response.status_code}: {e.response.text}", e,
                                status_code=e.response.status_code)
        except (httpx.HTTPError, ValueError) as e:
            self.record_failure(e)
            raise ProviderError(self.name, str(e), e)

        data = payload.get("data") if isinstance(payload, dict) else None
        if data is None:
            data = []
        if not isinstance(data, list):
            raise ProviderError(self.name, f"Unexpected response shape from {path}")

        self.record_success()
        return data

    async def hotels_by_geocode(
        self,
        token: str,
        latitude: float,
        longitude: float,
        radius: int,
        radius_unit: str,
        ratings: List[str],
        hotel_source: str,
    ) -> List[Dict[str, Any]]:
        """Hotel list around a coordinate (Hotel List API)"""
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "radius": radius,
            "radiusUnit": radius_unit,
            "hotelSource": hotel_source,
        }
        if ratings:
            params["ratings"] = ",".join(ratings)
        return await self._get_data(HOTELS_BY_GEOCODE_PATH, token, params)

    async def hotel_offers(self, token: str, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Offers for a batch of hotels (Hotel Search API v3)"""
        return await self._get_data(HOTEL_OFFERS_PATH, token, params)
