# atlas/services/content_service.py
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from typing import List, Optional, Dict, Any
import logging

from atlas.services.visibility import WorldAccess

logger = logging.getLogger(__name__)


def matches_text(value: Optional[str], term: str) -> bool:
    """Case-insensitive substring match that tolerates missing values"""
    return term.lower() in (value or "").lower()


class ContentService:
    """
    Base repository for world-scoped content.

    Subclasses set `model` and override `apply_filters` / `sort_rows` for their
    category. Rows are gated by the visibility rule before any filtering.
    """

    model = None

    def __init__(self, db: Session):
        self.db = db

    def _query_world(self, world_id: str):
        return self.db.query(self.model).filter(self.model.world_id == world_id)

    def _commit(self, action: str):
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed {action} {self.model.__tablename__}: {str(e)}")
            raise

    def get_rows(self, world_id: str) -> List[Any]:
        """Get every row of a world, ungated."""
        return self._query_world(world_id).all()

    def list_visible(self, access: WorldAccess, filters: Dict[str, Any] = None) -> List[Any]:
        """
        Get the rows of a world that the viewer may see.

        Args:
            access: Result of the visibility gate for the current viewer.
            filters: Optional in-process filters (search, category, ...).

        Returns:
            Visible rows, filtered and sorted for the category.
        """
        rows = access.visible(self.get_rows(access.world_id))
        if filters:
            rows = self.apply_filters(rows, filters)
        return self.sort_rows(rows)

    def apply_filters(self, rows: List[Any], filters: Dict[str, Any]) -> List[Any]:
        return rows

    def sort_rows(self, rows: List[Any]) -> List[Any]:
        return rows

    def get_item(self, world_id: str, item_id: str) -> Optional[Any]:
        """Get a row by ID, only if it belongs to the world."""
        return self._query_world(world_id).filter(self.model.id == item_id).first()

    def create_item(self, world_id: str, data: Dict[str, Any]) -> Any:
        """Insert a row into a world."""
        item = self.model(world_id=world_id, **data)
        self.db.add(item)
        self._commit("creating")
        self.db.refresh(item)
        logger.info(f"Created {self.model.__tablename__} row {item.id} in world {world_id}")
        return item

    def update_item(self, world_id: str, item_id: str, update_data: Dict[str, Any]) -> Optional[Any]:
        """Update fields of a row; returns None when the row is not in the world."""
        item = self.get_item(world_id, item_id)
        if not item:
            return None

        # Only update provided columns; ownership columns never move
        columns = self.model.__table__.columns
        for key, value in update_data.items():
            if key in ("id", "world_id") or key not in columns:
                continue
            if value is None and not columns[key].nullable:
                continue
            setattr(item, key, value)

        self._commit("updating")
        self.db.refresh(item)
        return item

    def delete_item(self, world_id: str, item_id: str) -> bool:
        """Delete a row; returns False when the row is not in the world."""
        item = self.get_item(world_id, item_id)
        if not item:
            return False

        self.db.delete(item)
        self._commit("deleting")
        logger.info(f"Deleted {self.model.__tablename__} row {item_id} from world {world_id}")
        return True
