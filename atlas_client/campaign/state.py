#!/usr/bin/env python
# Session state for the Campaign Atlas client
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List

from atlas.services.visibility import Viewer, WorldAccess, resolve_access

CATEGORIES = ("locations", "lore", "rules", "monsters", "notes")


def empty_collections() -> Dict[str, List[Dict[str, Any]]]:
    return {category: [] for category in CATEGORIES}


@dataclass
class AtlasState:
    """
    Everything the client knows about the current session.
    
    The viewer identity and the gate result are plain values re-derived on
    every world selection and every sign-in or sign-out; collections are
    dropped at the same moments so nothing fetched under the old identity
    survives.
    """
    
    # Authentication state
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    viewer: Viewer = field(default_factory=Viewer.anonymous)
    
    # World state
    current_world: Optional[Dict[str, Any]] = None
    access: Optional[WorldAccess] = None
    worlds_cache: List[Dict[str, Any]] = field(default_factory=list)
    
    # Content per category for the current world
    collections: Dict[str, List[Dict[str, Any]]] = field(default_factory=empty_collections)
    
    def is_authenticated(self) -> bool:
        """Check if user is currently authenticated"""
        return self.access_token is not None
    
    @property
    def current_world_id(self) -> Optional[str]:
        return self.current_world["id"] if self.current_world else None
    
    @property
    def can_edit(self) -> bool:
        """Mutation controls are only offered to the world owner"""
        return self.access is not None and self.access.can_mutate
    
    def set_auth(self, data: Dict[str, Any]):
        """Set authentication data from API response"""
        self.access_token = data.get("access_token")
        self.refresh_token = data.get("refresh_token")
        self.viewer = Viewer(user_id=data.get("user_id"), email=data.get("email"))
        self._regate()
    
    def clear_auth(self):
        """Clear authentication data"""
        self.access_token = None
        self.refresh_token = None
        self.viewer = Viewer.anonymous()
        self.worlds_cache = []
        self._regate()
    
    def _regate(self):
        self.collections = empty_collections()
        if self.current_world:
            self.access = resolve_access(self.current_world, self.viewer)
        else:
            self.access = None
    
    def select_world(self, world: Dict[str, Any]):
        """Make a world current and run the gate for the current viewer"""
        self.current_world = world
        self._regate()
    
    def clear_world(self):
        """Back to the world-selection state"""
        self.current_world = None
        self._regate()
    
    def cache_worlds(self, worlds: List[Dict[str, Any]]):
        """Cache world data"""
        self.worlds_cache = worlds
    
    def set_collection(self, category: str, rows: List[Dict[str, Any]]):
        """Store a fetched collection, keeping only rows the viewer may see"""
        if self.access is None:
            self.collections[category] = []
            return
        self.collections[category] = self.access.visible(rows)
    
    def replace_row(self, category: str, row: Dict[str, Any]):
        """Swap in a newer copy of a row, matched by id"""
        self.collections[category] = [
            row if existing.get("id") == row.get("id") else existing
            for existing in self.collections[category]
        ]
    
    def find_row(self, category: str, item_id: str) -> Optional[Dict[str, Any]]:
        for row in self.collections[category]:
            if row.get("id") == item_id:
                return row
        return None


# Global state instance
atlas_state = AtlasState()
