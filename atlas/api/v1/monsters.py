# atlas/api/v1/monsters.py
from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List, Optional

from atlas import schemas
from atlas.api.dependencies import get_service, get_world_access, require_world_owner
from atlas.services.monster_service import MonsterService
from atlas.services.visibility import WorldAccess

router = APIRouter()


@router.get("/", response_model=List[schemas.MonsterResponse])
async def list_monsters(
    search: Optional[str] = Query(None, description="Match against monster names"),
    type: Optional[str] = Query(None, description="Creature type, e.g. Undead"),
    homebrew: Optional[bool] = None,
    access: WorldAccess = Depends(get_world_access),
    monster_service: MonsterService = Depends(get_service(MonsterService))
):
    """
    List the bestiary entries the viewer may see, sorted by name
    """
    filters = {'search': search, 'type': type, 'homebrew': homebrew}
    return monster_service.list_visible(access, filters)


@router.post("/", response_model=schemas.MonsterResponse, status_code=status.HTTP_201_CREATED)
async def create_monster(
    monster: schemas.MonsterCreate,
    access: WorldAccess = Depends(require_world_owner),
    monster_service: MonsterService = Depends(get_service(MonsterService))
):
    """
    Add a stat block to the bestiary; the slug is derived from the name if omitted
    """
    return monster_service.create_item(access.world_id, monster.model_dump())


@router.get("/{item_id}", response_model=schemas.MonsterResponse)
async def get_monster(
    item_id: str,
    access: WorldAccess = Depends(get_world_access),
    monster_service: MonsterService = Depends(get_service(MonsterService))
):
    monster = monster_service.get_item(access.world_id, item_id)
    if not monster or not access.can_view(monster):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Monster not found"
        )
    return monster


@router.put("/{item_id}", response_model=schemas.MonsterResponse)
async def update_monster(
    item_id: str,
    monster_update: schemas.MonsterUpdate,
    access: WorldAccess = Depends(require_world_owner),
    monster_service: MonsterService = Depends(get_service(MonsterService))
):
    monster = monster_service.update_item(
        access.world_id, item_id, monster_update.model_dump(exclude_unset=True)
    )
    if not monster:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Monster not found"
        )
    return monster


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_monster(
    item_id: str,
    access: WorldAccess = Depends(require_world_owner),
    monster_service: MonsterService = Depends(get_service(MonsterService))
):
    if not monster_service.delete_item(access.world_id, item_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Monster not found"
        )
    return None
