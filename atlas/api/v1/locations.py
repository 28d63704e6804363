# atlas/api/v1/locations.py
from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List, Optional

from atlas import schemas
from atlas.api.dependencies import get_service, get_world_access, require_world_owner
from atlas.services.location_service import LocationService
from atlas.services.visibility import WorldAccess

router = APIRouter()


@router.get("/", response_model=List[schemas.LocationResponse])
async def list_locations(
    search: Optional[str] = Query(None, description="Match against location names"),
    access: WorldAccess = Depends(get_world_access),
    location_service: LocationService = Depends(get_service(LocationService))
):
    """
    List the map pins the viewer may see, sorted by name
    """
    filters = {}
    if search:
        filters['search'] = search
    return location_service.list_visible(access, filters)


@router.post("/", response_model=schemas.LocationResponse, status_code=status.HTTP_201_CREATED)
async def create_location(
    location: schemas.LocationCreate,
    access: WorldAccess = Depends(require_world_owner),
    location_service: LocationService = Depends(get_service(LocationService))
):
    """
    Pin a new location on the world map
    """
    return location_service.create_item(access.world_id, location.model_dump())


@router.get("/{item_id}", response_model=schemas.LocationResponse)
async def get_location(
    item_id: str,
    access: WorldAccess = Depends(get_world_access),
    location_service: LocationService = Depends(get_service(LocationService))
):
    """
    Get one location; hidden locations are reported as missing
    """
    location = location_service.get_item(access.world_id, item_id)
    if not location or not access.can_view(location):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Location not found"
        )
    return location


@router.put("/{item_id}", response_model=schemas.LocationResponse)
async def update_location(
    item_id: str,
    location_update: schemas.LocationUpdate,
    access: WorldAccess = Depends(require_world_owner),
    location_service: LocationService = Depends(get_service(LocationService))
):
    """
    Update a location's details
    """
    location = location_service.update_item(
        access.world_id, item_id, location_update.model_dump(exclude_unset=True)
    )
    if not location:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Location not found"
        )
    return location


@router.patch("/{item_id}/position", response_model=schemas.LocationResponse)
async def move_location(
    item_id: str,
    position: schemas.LocationPosition,
    access: WorldAccess = Depends(require_world_owner),
    location_service: LocationService = Depends(get_service(LocationService))
):
    """
    Move a marker after it was dragged on the map
    """
    location = location_service.move_location(access.world_id, item_id, position.x, position.y)
    if not location:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Location not found"
        )
    return location


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_location(
    item_id: str,
    access: WorldAccess = Depends(require_world_owner),
    location_service: LocationService = Depends(get_service(LocationService))
):
    """
    Remove a location from the map
    """
    if not location_service.delete_item(access.world_id, item_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Location not found"
        )
    return None
