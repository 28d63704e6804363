# atlas/services/monster_service.py
import re
from typing import List, Dict, Any

from atlas.models.monster import Monster
from atlas.services.content_service import ContentService, matches_text


def slugify(name: str) -> str:
    """Lowercase, hyphen-separated slug for a monster name"""
    return re.sub(r"\s+", "-", name.strip().lower())


class MonsterService(ContentService):
    """Service for a world's bestiary"""

    model = Monster

    def create_item(self, world_id: str, data: Dict[str, Any]) -> Monster:
        if not data.get("slug"):
            data = {**data, "slug": slugify(data["name"])}
        return super().create_item(world_id, data)

    def apply_filters(self, rows: List[Monster], filters: Dict[str, Any]) -> List[Monster]:
        if filters.get('search'):
            rows = [m for m in rows if matches_text(m.name, filters['search'])]
        if filters.get('type'):
            wanted = filters['type'].lower()
            rows = [m for m in rows if (m.type or "").lower() == wanted]
        if filters.get('homebrew') is not None:
            rows = [m for m in rows if m.is_homebrew == filters['homebrew']]
        return rows

    def sort_rows(self, rows: List[Monster]) -> List[Monster]:
        return sorted(rows, key=lambda m: (m.name or "").lower())
