# atlas/api/v1/worlds.py
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from atlas import schemas
from atlas.api.auth import get_current_user
from atlas.api.dependencies import get_service, get_world_access, require_world_owner
from atlas.config import get_settings
from atlas.services.share_links import build_share_link
from atlas.services.visibility import Viewer, WorldAccess
from atlas.services.world_service import WorldService

router = APIRouter()


@router.post("/", response_model=schemas.WorldResponse, status_code=status.HTTP_201_CREATED)
async def create_world(
    world: schemas.WorldCreate,
    current_user: Viewer = Depends(get_current_user),
    world_service: WorldService = Depends(get_service(WorldService))
):
    """
    Create a new world owned by the caller
    """
    return world_service.create_world(
        owner_id=current_user.user_id,
        name=world.name,
        description=world.description,
        map_url=world.map_url or get_settings().DEFAULT_MAP_URL,
        is_public=world.is_public
    )


@router.get("/", response_model=List[schemas.WorldResponse])
async def list_my_worlds(
    current_user: Viewer = Depends(get_current_user),
    world_service: WorldService = Depends(get_service(WorldService))
):
    """
    List the worlds owned by the caller, newest first
    """
    return world_service.get_user_worlds(current_user.user_id)


@router.get("/{world_id}", response_model=schemas.WorldDetailResponse)
async def get_world(
    access: WorldAccess = Depends(get_world_access),
    world_service: WorldService = Depends(get_service(WorldService))
):
    """
    Get a world as seen by the current viewer.
    
    Owners can always open their worlds; anyone may open a public world.
    """
    world = world_service.get_world(access.world_id)
    detail = schemas.WorldResponse.model_validate(world).model_dump()
    return {
        **detail,
        "is_owner": access.is_owner,
        "role": access.role,
        "share_url": build_share_link(get_settings().APP_URL, world.id)
    }


@router.put("/{world_id}", response_model=schemas.WorldResponse)
async def update_world(
    world_update: schemas.WorldUpdate,
    access: WorldAccess = Depends(require_world_owner),
    world_service: WorldService = Depends(get_service(WorldService))
):
    """
    Update world settings (name, description, map, visibility)
    
    Only the owner may update their world.
    """
    updated_world = world_service.update_world(
        access.world_id, world_update.model_dump(exclude_unset=True)
    )
    if not updated_world:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="World not found"
        )
    return updated_world


@router.delete("/{world_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_world(
    access: WorldAccess = Depends(require_world_owner),
    world_service: WorldService = Depends(get_service(WorldService))
):
    """
    Delete a world and everything in it
    
    Only the world owner may delete their world.
    """
    if not world_service.delete_world(access.world_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="World not found"
        )
    return None
