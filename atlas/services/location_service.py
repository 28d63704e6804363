# atlas/services/location_service.py
from typing import List, Optional, Dict, Any

from atlas.models.location import Location
from atlas.services.content_service import ContentService, matches_text


class LocationService(ContentService):
    """Service for map locations (pins)"""

    model = Location

    def apply_filters(self, rows: List[Location], filters: Dict[str, Any]) -> List[Location]:
        if filters.get('search'):
            rows = [loc for loc in rows if matches_text(loc.name, filters['search'])]
        return rows

    def sort_rows(self, rows: List[Location]) -> List[Location]:
        return sorted(rows, key=lambda loc: (loc.name or "").lower())

    def move_location(self, world_id: str, location_id: str, x: float, y: float) -> Optional[Location]:
        """Move a marker; only the position is written."""
        return self.update_item(world_id, location_id, {"x": x, "y": y})
