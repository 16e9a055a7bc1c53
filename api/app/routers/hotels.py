"""
Hotel Search Endpoints - proxy to the Amadeus hotel APIs
"""
from fastapi import APIRouter, Depends, Query
from typing import List, Literal, Optional
from datetime import date
import logging

from app.dependencies import get_hotel_service
from app.routers.auth import get_optional_user
from app.schemas.hotel import HotelOffersResponse, HotelSuggestionResponse
from app.services.hotel_service import HotelService
from app.utils.errors import BadRequestError

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/by-geocode", response_model=HotelSuggestionResponse)
async def search_hotels_by_geocode(
    latitude: float = Query(..., ge=-90, le=90),
    longitude: float = Query(..., ge=-180, le=180),
    radius: int = Query(5, ge=1, le=300),
    radius_unit: Literal["KM", "MILE"] = Query("KM"),
    ratings: Optional[List[str]] = Query(None, description="Star ratings, e.g. ratings=4&ratings=5"),
    hotel_source: Literal["BEDBANK", "DIRECTCHAIN", "ALL"] = Query("ALL"),
    current_user: Optional[dict] = Depends(get_optional_user),
    service: HotelService = Depends(get_hotel_service),
):
    """
    Hotels around a coordinate. An upstream failure yields an empty list with success=false.
    """
    result = await service.search_by_geocode(
        latitude=latitude,
        longitude=longitude,
        radius=radius,
        radius_unit=radius_unit,
        ratings=ratings or [],
        hotel_source=hotel_source,
    )
    return HotelSuggestionResponse(
        hotels=result.items,
        count=len(result.items),
        success=result.success,
        error=result.error_message,
    )


@router.get("/offers", response_model=HotelOffersResponse)
async def get_hotel_offers(
    hotel_ids: str = Query(..., description="Comma-separated Amadeus hotel ids"),
    adults: int = Query(1, ge=1, le=9),
    check_in_date: date = Query(...),
    check_out_date: date = Query(...),
    room_quantity: int = Query(1, ge=1, le=9),
    price_range: Optional[str] = Query(None, description="'min-max' or 'min'"),
    currency: str = Query("INR", min_length=3, max_length=3),
    board_type: Optional[Literal["ROOM_ONLY", "BREAKFAST", "HALF_BOARD", "FULL_BOARD", "ALL_INCLUSIVE"]] = Query(None),
    include_closed: bool = Query(False),
    best_rate_only: bool = Query(True),
    lang: str = Query("EN"),
    current_user: Optional[dict] = Depends(get_optional_user),
    service: HotelService = Depends(get_hotel_service),
):
    """
    Offers for a batch of hotels. An upstream failure yields an empty list with success=false.
    """
    ids = [hotel_id.strip() for hotel_id in hotel_ids.split(",") if hotel_id.strip()]
    if not ids:
        raise BadRequestError("hotel_ids must contain at least one id")
    if check_out_date <= check_in_date:
        raise BadRequestError("check_out_date must be after check_in_date")

    result = await service.get_hotel_offers(
        hotel_ids=ids,
        adults=adults,
        check_in_date=check_in_date.isoformat(),
        check_out_date=check_out_date.isoformat(),
        room_quantity=room_quantity,
        price_range=price_range,
        currency=currency.upper(),
        board_type=board_type,
        include_closed=include_closed,
        best_rate_only=best_rate_only,
        lang=lang,
    )
    return HotelOffersResponse(
        offers=result.items,
        count=len(result.items),
        success=result.success,
        error=result.error_message,
    )
