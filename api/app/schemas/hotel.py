"""
Hotel Schemas
"""
from pydantic import BaseModel
from typing import Optional, List, Dict, Any


class HotelSuggestion(BaseModel):
    """A hotel near a coordinate, flattened from the Amadeus hotel list"""
    name: Optional[str] = None
    hotel_id: Optional[str] = None
    distance_km: Optional[float] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    address: Optional[str] = None  # country code


class HotelSuggestionResponse(BaseModel):
    """`success` is False when the lookup failed rather than found nothing"""
    hotels: List[HotelSuggestion]
    count: int
    success: bool
    error: Optional[str] = None


class HotelOffersResponse(BaseModel):
    """Raw Amadeus hotel-offer objects"""
    offers: List[Dict[str, Any]]
    count: int
    success: bool
    error: Optional[str] = None
