"""
Wishlist Schemas
"""
from pydantic import BaseModel
from typing import Optional, Dict, Any
from datetime import datetime


class WishlistEntryResponse(BaseModel):
    id: str
    user_id: str
    poi_id: str
    created_at: Optional[datetime] = None
    poi: Optional[Dict[str, Any]] = None


class WishlistRemoveResponse(BaseModel):
    poi_id: str
    user_id: str
