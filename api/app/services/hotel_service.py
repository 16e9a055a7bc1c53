"""
Hotel Service - Amadeus hotel lookups reshaped for the front-end
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import logging
import time

from app.services.amadeus_auth import AmadeusTokenService
from app.services.providers.amadeus import AmadeusProvider

logger = logging.getLogger(__name__)


@dataclass
class HotelSearchResult:
    """Result from a hotel lookup; failures carry an empty item list"""
    provider_name: str
    items: List[Dict[str, Any]] = field(default_factory=list)
    success: bool = True
    error_message: Optional[str] = None
    response_time_ms: Optional[float] = None


def _to_suggestion(hotel: Dict[str, Any]) -> Dict[str, Any]:
    distance = hotel.get("distance") or {}
    geo = hotel.get("geoCode") or {}
    address = hotel.get("address") or {}
    distance_km = None
    if distance.get("value"):
        distance_km = float(distance["value"])
    return {
        "name": hotel.get("name"),
        "hotel_id": hotel.get("hotelId"),
        "distance_km": distance_km,
        "latitude": geo.get("latitude"),
        "longitude": geo.get("longitude"),
        "address": address.get("countryCode"),
    }


def _offer_sample(offer: Dict[str, Any]) -> Dict[str, Any]:
    hotel = offer.get("hotel")
    rooms = offer.get("offers")
    first = rooms[0] if isinstance(rooms, list) and rooms else None
    price = first.get("price") if isinstance(first, dict) else None
    return {
        "hotel_id": hotel.get("hotelId") if isinstance(hotel, dict) else None,
        "price": price.get("total") if isinstance(price, dict) else None,
    }


class HotelService:
    """
    Searches never raise: any failure (token, network, bad payload) turns
    into an unsuccessful result with no items.
    """

    def __init__(self, provider: AmadeusProvider, token_service: AmadeusTokenService, verbose: bool = False):
        self._provider = provider
        self._tokens = token_service
        self._verbose = verbose

    def _failed(self, started: float, error: Exception) -> HotelSearchResult:
        return HotelSearchResult(
            provider_name=self._provider.name,
            success=False,
            error_message=str(error),
            response_time_ms=(time.time() - started) * 1000,
        )

    async def search_by_geocode(
        self,
        latitude: float,
        longitude: float,
        radius: int = 5,
        radius_unit: str = "KM",
        ratings: Optional[List[str]] = None,
        hotel_source: str = "ALL",
    ) -> HotelSearchResult:
        ratings = ratings or []
        started = time.time()
        logger.debug(
            f"Amadeus by-geocode lat={latitude} lng={longitude} radius={radius}{radius_unit} "
            f"ratings={ratings} source={hotel_source}"
        )
        try:
            token = await self._tokens.get_token()
            raw = await self._provider.hotels_by_geocode(
                token,
                latitude=latitude,
                longitude=longitude,
                radius=radius,
                radius_unit=radius_unit,
                ratings=ratings,
                hotel_source=hotel_source,
            )
            hotels = [_to_suggestion(h) for h in raw if isinstance(h, dict)]
        except Exception as e:
            logger.error(f"Amadeus by-geocode failed for ({latitude}, {longitude}): {e}")
            return self._failed(started, e)

        if self._verbose:
            sample = [{"hotel_id": h["hotel_id"], "distance_km": h["distance_km"]} for h in hotels[:3]]
            logger.info(f"Amadeus by-geocode returned {len(hotels)} hotels, sample={sample}")

        return HotelSearchResult(
            provider_name=self._provider.name,
            items=hotels,
            response_time_ms=(time.time() - started) * 1000,
        )

    async def get_hotel_offers(
        self,
        hotel_ids: List[str],
        adults: int,
        check_in_date: str,
        check_out_date: str,
        room_quantity: int = 1,
        price_range: Optional[str] = None,
        currency: str = "INR",
        board_type: Optional[str] = None,
        include_closed: bool = False,
        best_rate_only: bool = True,
        lang: str = "EN",
    ) -> HotelSearchResult:
        """Raw Amadeus offer objects for a batch of hotel ids"""
        started = time.time()
        params: Dict[str, Any] = {
            "hotelIds": ",".join(hotel_ids),
            "adults": adults,
            "checkInDate": check_in_date,
            "checkOutDate": check_out_date,
            "roomQuantity": room_quantity,
            "currency": currency,
            "includeClosed": include_closed,
            "bestRateOnly": best_rate_only,
            "lang": lang,
        }
        if price_range:
            params["priceRange"] = price_range
        if board_type:
            params["boardType"] = board_type

        try:
            token = await self._tokens.get_token()
            raw = await self._provider.hotel_offers(token, params)
        except Exception as e:
            logger.error(f"Amadeus hotel-offers failed for {params['hotelIds']}: {e}")
            return self._failed(started, e)

        offers = [o for o in raw if isinstance(o, dict)]
        if len(offers) < len(raw):
            logger.warning(f"Amadeus hotel-offers dropped {len(raw) - len(offers)} non-object entries")

        if self._verbose:
            sample = [_offer_sample(o) for o in offers[:2]]
            logger.info(f"Amadeus hotel-offers returned {len(offers)} hotels, sample={sample}")

        return HotelSearchResult(
            provider_name=self._provider.name,
            items=offers,
            response_time_ms=(time.time() - started) * 1000,
        )
