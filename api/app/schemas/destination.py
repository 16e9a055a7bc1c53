"""
Destination Schemas
"""
from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any, Literal, Tuple
from datetime import datetime


class GeoJSONPoint(BaseModel):
    """GeoJSON Point, coordinates in [lng, lat] order"""
    type: Literal["Point"] = "Point"
    coordinates: Tuple[float, float]


class GeoJSONPolygon(BaseModel):
    """GeoJSON Polygon as a list of linear rings"""
    type: Literal["Polygon"] = "Polygon"
    coordinates: List[List[Tuple[float, float]]]


class DestinationCreate(BaseModel):
    """Schema for creating a destination"""
    name: str = Field(..., min_length=1, max_length=120)
    slug: str = Field(..., min_length=1, max_length=140)
    area: Optional[GeoJSONPolygon] = None
    center: Optional[GeoJSONPoint] = None
    center_lat: float = Field(..., ge=-90, le=90)
    center_lng: float = Field(..., ge=-180, le=180)
    metadata: Dict[str, Any] = {}
    base_price: Optional[float] = Field(None, ge=0)
    altitude_m: Optional[float] = None


class DestinationUpdate(BaseModel):
    """Partial update; only fields the client sends are written"""
    name: Optional[str] = Field(None, min_length=1, max_length=120)
    slug: Optional[str] = Field(None, min_length=1, max_length=140)
    area: Optional[GeoJSONPolygon] = None
    center: Optional[GeoJSONPoint] = None
    center_lat: Optional[float] = Field(None, ge=-90, le=90)
    center_lng: Optional[float] = Field(None, ge=-180, le=180)
    metadata: Optional[Dict[str, Any]] = None
    base_price: Optional[float] = Field(None, ge=0)
    altitude_m: Optional[float] = None


class DestinationUpdateRequest(BaseModel):
    """PATCH body wraps the changes in `payload`"""
    payload: DestinationUpdate


class DestinationResponse(BaseModel):
    """Schema for destination response"""
    id: str
    name: str
    slug: str
    area: Optional[GeoJSONPolygon] = None
    center: Optional[GeoJSONPoint] = None
    center_lat: float
    center_lng: float
    metadata: Dict[str, Any] = {}
    base_price: Optional[float] = None
    altitude_m: Optional[float] = None
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DestinationDeleteResponse(BaseModel):
    destination_id: str
