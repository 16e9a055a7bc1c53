"""
POI Wishlist Endpoints
"""
from fastapi import APIRouter, Depends
from typing import List
from uuid import UUID

from app.dependencies import get_wishlist_service
from app.routers.auth import get_current_user
from app.schemas.wishlist import WishlistEntryResponse, WishlistRemoveResponse
from app.services.wishlist_service import WishlistService

router = APIRouter()


@router.get("/{user_id}", response_model=List[WishlistEntryResponse])
async def get_wishlist(
    user_id: UUID,
    current_user: dict = Depends(get_current_user),
    service: WishlistService = Depends(get_wishlist_service),
):
    """
    All wishlisted POIs of a user
    """
    return await service.get_all_by_user(str(user_id))


@router.post("/{user_id}/{poi_id}", response_model=WishlistEntryResponse)
async def add_to_wishlist(
    user_id: UUID,
    poi_id: UUID,
    current_user: dict = Depends(get_current_user),
    service: WishlistService = Depends(get_wishlist_service),
):
    """
    Add a POI to a user's wishlist
    """
    return await service.add(str(user_id), str(poi_id))


@router.delete("/{user_id}/{poi_id}", response_model=WishlistRemoveResponse)
async def remove_from_wishlist(
    user_id: UUID,
    poi_id: UUID,
    current_user: dict = Depends(get_current_user),
    service: WishlistService = Depends(get_wishlist_service),
):
    """
    Remove a POI from a user's wishlist
    """
    return await service.remove(str(user_id), str(poi_id))
