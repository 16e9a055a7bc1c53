"""
Destination CRUD Endpoints
"""
from fastapi import APIRouter, Depends
from typing import List
import logging

from app.dependencies import get_destination_service
from app.routers.auth import get_current_user
from app.schemas.destination import (
    DestinationCreate,
    DestinationDeleteResponse,
    DestinationResponse,
    DestinationUpdateRequest,
)
from app.services.destination_service import DestinationService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=List[DestinationResponse])
async def list_destinations(
    current_user: dict = Depends(get_current_user),
    service: DestinationService = Depends(get_destination_service),
):
    """
    List all destinations
    """
    return await service.get_all()


@router.post("", response_model=DestinationResponse)
async def create_destination(
    body: DestinationCreate,
    current_user: dict = Depends(get_current_user),
    service: DestinationService = Depends(get_destination_service),
):
    """
    Create a destination (name, slug, coordinates, optional geometry and metadata)
    """
    return await service.create(body, created_by=current_user.get("id"))


@router.get("/{destination_id}", response_model=DestinationResponse)
async def get_destination(
    destination_id: str,
    current_user: dict = Depends(get_current_user),
    service: DestinationService = Depends(get_destination_service),
):
    """
    Get a single destination
    """
    return await service.get_by_id(destination_id)


@router.patch("/{destination_id}", response_model=DestinationResponse)
async def update_destination(
    destination_id: str,
    body: DestinationUpdateRequest,
    current_user: dict = Depends(get_current_user),
    service: DestinationService = Depends(get_destination_service),
):
    """
    Partially update a destination; omitted fields are left untouched
    """
    return await service.update(destination_id, body.payload)


@router.delete("/{destination_id}", response_model=DestinationDeleteResponse)
async def delete_destination(
    destination_id: str,
    current_user: dict = Depends(get_current_user),
    service: DestinationService = Depends(get_destination_service),
):
    """
    Delete a destination
    """
    return await service.delete(destination_id)
