# atlas/api/v1/notes.py
from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List, Optional

from atlas import schemas
from atlas.api.dependencies import get_service, get_world_access, require_world_owner
from atlas.models.enums import NoteCategory
from atlas.services.note_service import NoteService
from atlas.services.visibility import WorldAccess

router = APIRouter()


@router.get("/", response_model=List[schemas.NoteResponse])
async def list_notes(
    search: Optional[str] = Query(None, description="Match against title and content"),
    category: Optional[NoteCategory] = None,
    access: WorldAccess = Depends(get_world_access),
    note_service: NoteService = Depends(get_service(NoteService))
):
    """
    List the GM notes the viewer may see, newest first.
    
    Guests only ever see notes the GM has chosen to reveal.
    """
    filters = {'search': search, 'category': category}
    return note_service.list_visible(access, filters)


@router.post("/", response_model=schemas.NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(
    note: schemas.NoteCreate,
    access: WorldAccess = Depends(require_world_owner),
    note_service: NoteService = Depends(get_service(NoteService))
):
    return note_service.create_item(access.world_id, note.model_dump(mode="json"))


@router.get("/{item_id}", response_model=schemas.NoteResponse)
async def get_note(
    item_id: str,
    access: WorldAccess = Depends(get_world_access),
    note_service: NoteService = Depends(get_service(NoteService))
):
    note = note_service.get_item(access.world_id, item_id)
    if not note or not access.can_view(note):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Note not found"
        )
    return note


@router.put("/{item_id}", response_model=schemas.NoteResponse)
async def update_note(
    item_id: str,
    note_update: schemas.NoteUpdate,
    access: WorldAccess = Depends(require_world_owner),
    note_service: NoteService = Depends(get_service(NoteService))
):
    note = note_service.update_item(
        access.world_id, item_id, note_update.model_dump(mode="json", exclude_unset=True)
    )
    if not note:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Note not found"
        )
    return note


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(
    item_id: str,
    access: WorldAccess = Depends(require_world_owner),
    note_service: NoteService = Depends(get_service(NoteService))
):
    if not note_service.delete_item(access.world_id, item_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Note not found"
        )
    return None
