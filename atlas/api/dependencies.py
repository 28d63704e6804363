# atlas/api/dependencies.py
from typing import Type, Callable
from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from atlas.database import get_db
from atlas.api.auth import get_viewer
from atlas.services.visibility import Viewer, WorldAccess
from atlas.services.world_service import WorldService


def get_service(service_class: Type) -> Callable:
    """Factory function to create service dependencies with DB injection"""
    def _get_service(db: Session = Depends(get_db)):
        return service_class(db)
    return _get_service


def get_world_access(
    world_id: str,
    viewer: Viewer = Depends(get_viewer),
    world_service: WorldService = Depends(get_service(WorldService))
) -> WorldAccess:
    """
    Run the visibility gate for the world in the path.
    Unknown worlds and worlds the viewer may not open are both a 404.
    """
    world, access = world_service.open_world(world_id, viewer)
    if not world:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="World not found"
        )
    return access


def require_world_owner(access: WorldAccess = Depends(get_world_access)) -> WorldAccess:
    """
    Verify that the current viewer owns the world and may change its content.
    """
    if not access.can_mutate:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only the world owner can change this world"
        )
    return access
