#!/usr/bin/env python
# World-scoped content collections (locations, lore, rules, monsters, notes)
import logging
from typing import Dict, Any, Optional, List

from atlas_client.api.base_service import BaseService, APIError
from atlas_client.ui.console import show_error, show_success, show_warning

logger = logging.getLogger(__name__)


class ContentService(BaseService):
    """
    Uniform fetch/create/update/delete for one content category of the
    current world.
    
    Reads never interrupt the user: a failed fetch leaves that category empty
    and the other categories untouched. Writes are only issued for the world
    owner; a failed write is reported and local state is left as it was.
    """
    
    category: str = ""
    label: str = "entry"
    
    def _endpoint(self, item_id: Optional[str] = None) -> str:
        endpoint = f"/worlds/{self.state.current_world_id}/{self.category}/"
        if item_id:
            endpoint += item_id
        return endpoint
    
    def _can_write(self, action: str) -> bool:
        if self.state.current_world is None:
            show_warning(f"Select a world before you {action} a {self.label}")
            return False
        if not self.state.can_edit:
            show_warning(f"Only the world owner can {action} a {self.label}")
            return False
        return True
    
    def fetch(self) -> List[Dict[str, Any]]:
        """Reload the category for the current world into state"""
        if self.state.current_world is None:
            return []
        
        try:
            rows = self.get(self._endpoint())
        except APIError as e:
            logger.warning(f"Failed to load {self.category}: {e.detail}")
            rows = []
        
        self.state.set_collection(self.category, rows)
        return self.state.collections[self.category]
    
    def query(self, **filters) -> List[Dict[str, Any]]:
        """Filtered listing from the server; does not touch state"""
        if self.state.current_world is None:
            return []
        
        params = {key: value for key, value in filters.items() if value is not None}
        try:
            rows = self.get(self._endpoint(), params=params)
        except APIError as e:
            logger.warning(f"Failed to search {self.category}: {e.detail}")
            return []
        
        if self.state.access is None:
            return []
        return self.state.access.visible(rows)
    
    def create(self, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Create a row in the current world"""
        if not self._can_write("create"):
            return None
        
        try:
            row = self.post(self._endpoint(), data)
        except APIError as e:
            show_error(f"Failed to create {self.label}: {e.detail}")
            return None
        
        show_success(f"Created {self.label}")
        self.fetch()
        return row
    
    def update(self, item_id: str, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Update a row in the current world"""
        if not self._can_write("update"):
            return None
        
        try:
            row = self.put(self._endpoint(item_id), data)
        except APIError as e:
            show_error(f"Failed to update {self.label}: {e.detail}")
            return None
        
        self.state.replace_row(self.category, row)
        return row
    
    def remove(self, item_id: str) -> bool:
        """Delete a row from the current world"""
        if not self._can_write("delete"):
            return False
        
        try:
            self.delete(self._endpoint(item_id))
        except APIError as e:
            show_error(f"Failed to delete {self.label}: {e.detail}")
            return False
        
        self.state.collections[self.category] = [
            row for row in self.state.collections[self.category] if row.get("id") != item_id
        ]
        return True


class LoreService(ContentService):
    category = "lore"
    label = "lore entry"


class RuleService(ContentService):
    category = "rules"
    label = "rule"


class MonsterService(ContentService):
    category = "monsters"
    label = "monster"


class NoteService(ContentService):
    category = "notes"
    label = "note"
