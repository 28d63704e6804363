# atlas/services/world_service.py
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from typing import List, Optional, Dict, Any, Tuple
import logging

from atlas.models.world import World
from atlas.services.visibility import Viewer, WorldAccess, can_open_world, resolve_access

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "description", "map_url", "is_public")


class WorldService:
    """Service for handling world operations."""

    def __init__(self, db: Session):
        self.db = db

    def _commit(self, action: str):
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed {action} world: {str(e)}")
            raise

    def create_world(
        self,
        owner_id: str,
        name: str,
        description: Optional[str] = None,
        map_url: Optional[str] = None,
        is_public: bool = False
    ) -> World:
        """
        Create a new world.

        Args:
            owner_id: ID of the user creating the world (owner).
            name: Name of the world.
            description: Description of the world.
            map_url: Image used as the world map.
            is_public: Whether guests may open the world by link.
        """
        world = World(
            name=name,
            description=description,
            map_url=map_url,
            owner_id=owner_id,
            is_public=is_public
        )
        self.db.add(world)
        self._commit("creating")
        self.db.refresh(world)
        logger.info(f"World {world.id} created by {owner_id}")
        return world

    def get_world(self, world_id: str) -> Optional[World]:
        """Get a world by its ID."""
        return self.db.query(World).filter(World.id == world_id).first()

    def get_user_worlds(self, user_id: str) -> List[World]:
        """Get all worlds owned by a specific user, newest first."""
        return self.db.query(World).filter(
            World.owner_id == user_id
        ).order_by(World.created_at.desc(), World.name).all()

    def open_world(self, world_id: str, viewer: Viewer) -> Tuple[Optional[World], Optional[WorldAccess]]:
        """
        Look up a world for a viewer and run the visibility gate.

        Returns (None, None) when the world does not exist or the viewer may
        not open it; both cases look the same to the caller.
        """
        world = self.get_world(world_id)
        if not world or not can_open_world(world, viewer):
            return None, None
        return world, resolve_access(world, viewer)

    def update_world(self, world_id: str, update_data: Dict[str, Any]) -> Optional[World]:
        """Update properties of a world."""
        world = self.get_world(world_id)
        if not world:
            return None

        # Only update provided fields; ownership never changes
        for key, value in update_data.items():
            if key not in UPDATABLE_FIELDS:
                continue
            if value is None and not World.__table__.columns[key].nullable:
                continue
            setattr(world, key, value)

        self._commit("updating")
        self.db.refresh(world)
        return world

    def delete_world(self, world_id: str) -> bool:
        """
        Delete a world and all its associated content.
        Cascade deletion on relationships is handled by the ORM.
        """
        world = self.get_world(world_id)
        if not world:
            return False

        self.db.delete(world)
        self._commit("deleting")
        logger.info(f"World {world_id} deleted")
        return True
