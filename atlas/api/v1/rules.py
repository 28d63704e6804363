# atlas/api/v1/rules.py
from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List, Optional

from atlas import schemas
from atlas.api.dependencies import get_service, get_world_access, require_world_owner
from atlas.services.rule_service import RuleService
from atlas.services.visibility import WorldAccess

router = APIRouter()


@router.get("/", response_model=List[schemas.RuleResponse])
async def list_rules(
    search: Optional[str] = Query(None, description="Match against name and description"),
    category: Optional[str] = None,
    access: WorldAccess = Depends(get_world_access),
    rule_service: RuleService = Depends(get_service(RuleService))
):
    """
    List the world's rules the viewer may see, together with the baseline rules
    """
    filters = {'search': search, 'category': category}
    return rule_service.list_visible(access, filters)


@router.get("/categories", response_model=List[str])
async def list_rule_categories(
    access: WorldAccess = Depends(get_world_access),
    rule_service: RuleService = Depends(get_service(RuleService))
):
    """
    Categories present among the rules the viewer may see
    """
    return rule_service.get_categories(rule_service.list_visible(access))


@router.post("/", response_model=schemas.RuleResponse, status_code=status.HTTP_201_CREATED)
async def create_rule(
    rule: schemas.RuleCreate,
    access: WorldAccess = Depends(require_world_owner),
    rule_service: RuleService = Depends(get_service(RuleService))
):
    """
    Add a house rule to the world
    """
    return rule_service.create_item(access.world_id, rule.model_dump())


@router.get("/{item_id}", response_model=schemas.RuleResponse)
async def get_rule(
    item_id: str,
    access: WorldAccess = Depends(get_world_access),
    rule_service: RuleService = Depends(get_service(RuleService))
):
    """
    Get one of the world's own rules
    """
    rule = rule_service.get_item(access.world_id, item_id)
    if not rule or not access.can_view(rule):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Rule not found"
        )
    return rule


@router.put("/{item_id}", response_model=schemas.RuleResponse)
async def update_rule(
    item_id: str,
    rule_update: schemas.RuleUpdate,
    access: WorldAccess = Depends(require_world_owner),
    rule_service: RuleService = Depends(get_service(RuleService))
):
    """
    Update one of the world's own rules; baseline rules cannot be changed
    """
    rule = rule_service.update_item(
        access.world_id, item_id, rule_update.model_dump(exclude_unset=True)
    )
    if not rule:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Rule not found"
        )
    return rule


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_rule(
    item_id: str,
    access: WorldAccess = Depends(require_world_owner),
    rule_service: RuleService = Depends(get_service(RuleService))
):
    if not rule_service.delete_item(access.world_id, item_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Rule not found"
        )
    return None
