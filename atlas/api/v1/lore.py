# atlas/api/v1/lore.py
from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List, Optional

from atlas import schemas
from atlas.api.dependencies import get_service, get_world_access, require_world_owner
from atlas.services.lore_service import LoreService
from atlas.services.visibility import WorldAccess

router = APIRouter()


@router.get("/", response_model=List[schemas.LoreResponse])
async def list_lore(
    search: Optional[str] = Query(None, description="Match against title and content"),
    era: Optional[str] = None,
    category: Optional[str] = None,
    access: WorldAccess = Depends(get_world_access),
    lore_service: LoreService = Depends(get_service(LoreService))
):
    """
    List the lore entries the viewer may see, in chronological order
    """
    filters = {'search': search, 'era': era, 'category': category}
    return lore_service.list_visible(access, filters)


@router.get("/eras", response_model=List[schemas.EraSummary])
async def list_eras(
    access: WorldAccess = Depends(get_world_access),
    lore_service: LoreService = Depends(get_service(LoreService))
):
    """
    Timeline of eras built from the entries the viewer may see
    """
    return lore_service.get_eras(lore_service.list_visible(access))


@router.post("/", response_model=schemas.LoreResponse, status_code=status.HTTP_201_CREATED)
async def create_lore(
    entry: schemas.LoreCreate,
    access: WorldAccess = Depends(require_world_owner),
    lore_service: LoreService = Depends(get_service(LoreService))
):
    """
    Record a new lore entry
    """
    return lore_service.create_item(access.world_id, entry.model_dump())


@router.get("/{item_id}", response_model=schemas.LoreResponse)
async def get_lore(
    item_id: str,
    access: WorldAccess = Depends(get_world_access),
    lore_service: LoreService = Depends(get_service(LoreService))
):
    """
    Get one lore entry; hidden entries are reported as missing
    """
    entry = lore_service.get_item(access.world_id, item_id)
    if not entry or not access.can_view(entry):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Lore entry not found"
        )
    return entry


@router.put("/{item_id}", response_model=schemas.LoreResponse)
async def update_lore(
    item_id: str,
    entry_update: schemas.LoreUpdate,
    access: WorldAccess = Depends(require_world_owner),
    lore_service: LoreService = Depends(get_service(LoreService))
):
    entry = lore_service.update_item(
        access.world_id, item_id, entry_update.model_dump(exclude_unset=True)
    )
    if not entry:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Lore entry not found"
        )
    return entry


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_lore(
    item_id: str,
    access: WorldAccess = Depends(require_world_owner),
    lore_service: LoreService = Depends(get_service(LoreService))
):
    if not lore_service.delete_item(access.world_id, item_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Lore entry not found"
        )
    return None
