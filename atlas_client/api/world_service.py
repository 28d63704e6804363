#!/usr/bin/env python
# World selection and management
import logging
from typing import Dict, Any, Optional, List

from atlas.services.share_links import build_share_link, parse_share_link
from atlas_client.api.base_service import BaseService, APIError
from atlas_client.api.content_service import LoreService, RuleService, MonsterService, NoteService
from atlas_client.api.location_service import LocationService
from atlas_client.utils.config import config
from atlas_client.ui.console import show_error, show_success, show_warning

logger = logging.getLogger(__name__)

CONTENT_SERVICES = (LocationService, LoreService, RuleService, MonsterService, NoteService)


class WorldService(BaseService):
    """Service for world-related API operations"""
    
    def content_service(self, service_class):
        """Build a content service sharing this service's state and session"""
        return service_class(state=self.state, session=self.session, api_url=self.api_url)
    
    def get_my_worlds(self) -> List[Dict[str, Any]]:
        """Get the worlds owned by the signed-in user"""
        if not self.state.is_authenticated():
            return []
        
        try:
            worlds = self.get("/worlds/")
        except APIError as e:
            logger.warning(f"Failed to get worlds: {e.detail}")
            worlds = []
        
        self.state.cache_worlds(worlds)
        return worlds
    
    def load_content(self):
        """Fetch every category of the current world; each one fails on its own"""
        for service_class in CONTENT_SERVICES:
            self.content_service(service_class).fetch()
    
    def open_world(self, world_id: str) -> Optional[Dict[str, Any]]:
        """
        Select a world and load what the current viewer may see of it.
        
        An unknown world, or one the viewer may not open, drops back to the
        world-selection state instead of raising.
        """
        try:
            world = self.get(f"/worlds/{world_id}")
        except APIError as e:
            logger.warning(f"Could not open world {world_id}: {e.detail}")
            self.state.clear_world()
            return None
        
        self.state.select_world(world)
        self.load_content()
        return world
    
    def open_link(self, url: str) -> Optional[Dict[str, Any]]:
        """Open the world named by a shared link"""
        world_id = parse_share_link(url)
        if world_id is None:
            self.state.clear_world()
            return None
        return self.open_world(world_id)
    
    def reopen(self) -> Optional[Dict[str, Any]]:
        """Re-run world selection, e.g. after signing in or out"""
        if self.state.current_world is None:
            return None
        return self.open_world(self.state.current_world_id)
    
    def share_link(self) -> Optional[str]:
        """Link to the current world"""
        if self.state.current_world is None:
            return None
        return self.state.current_world.get("share_url") or build_share_link(
            config.app_url, self.state.current_world_id
        )
    
    def create_world(self, name: str, description: Optional[str] = None,
                     map_url: Optional[str] = None, is_public: bool = False) -> Optional[Dict[str, Any]]:
        """Create a new world and open it"""
        if not self.state.is_authenticated():
            show_warning("Sign in to create a world")
            return None
        
        payload = {"name": name, "description": description, "is_public": is_public}
        if map_url:
            payload["map_url"] = map_url
        
        try:
            world = self.post("/worlds/", payload)
        except APIError as e:
            show_error(f"Failed to create world: {e.detail}")
            return None
        
        show_success(f"World '{name}' created")
        self.get_my_worlds()
        return self.open_world(world["id"])
    
    def update_world(self, update_data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Update the current world's settings"""
        if not self.state.can_edit:
            show_warning("Only the world owner can change its settings")
            return None
        
        try:
            self.put(f"/worlds/{self.state.current_world_id}", update_data)
        except APIError as e:
            show_error(f"Failed to update world: {e.detail}")
            return None
        
        return self.reopen()
    
    def delete_world(self, world_id: str) -> bool:
        """Delete one of the user's worlds"""
        owned = any(w.get("id") == world_id for w in self.state.worlds_cache)
        if not owned and not (world_id == self.state.current_world_id and self.state.can_edit):
            show_warning("Only the world owner can delete it")
            return False
        
        try:
            self.delete(f"/worlds/{world_id}")
        except APIError as e:
            show_error(f"Failed to delete world: {e.detail}")
            return False
        
        if world_id == self.state.current_world_id:
            self.state.clear_world()
        
        self.state.cache_worlds([w for w in self.state.worlds_cache if w.get("id") != world_id])
        return True
