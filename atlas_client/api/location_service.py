#!/usr/bin/env python
# Map locations, including marker drags
from typing import Dict, Any

from atlas_client.api.base_service import APIError
from atlas_client.api.content_service import ContentService
from atlas_client.ui.console import show_error


class LocationService(ContentService):
    """Service for the pins on the world map"""
    
    category = "locations"
    label = "location"
    
    def pin(self, name: str, x: float, y: float, **details: Any):
        """Pin a new location where the map was clicked"""
        data: Dict[str, Any] = {"name": name, "x": x, "y": y, "description": "New location."}
        data.update(details)
        return self.create(data)
    
    def move_marker(self, location_id: str, x: float, y: float) -> bool:
        """
        Move a marker.
        
        The local copy moves at once; if the server rejects the move the
        collection is re-fetched so the map shows the stored position again.
        """
        if not self._can_write("move"):
            return False
        
        row = self.state.find_row(self.category, location_id)
        if row is not None:
            self.state.replace_row(self.category, {**row, "x": x, "y": y})
        
        try:
            updated = self.patch(f"{self._endpoint(location_id)}/position", {"x": x, "y": y})
        except APIError as e:
            show_error(f"Failed to update position: {e.detail}")
            self.fetch()
            return False
        
        self.state.replace_row(self.category, updated)
        return True
