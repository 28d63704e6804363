# atlas/services/lore_service.py
from typing import List, Dict, Any

from atlas.models.lore import LoreEntry
from atlas.services.content_service import ContentService, matches_text


class LoreService(ContentService):
    """Service for lore entries, ordered along the world's timeline"""

    model = LoreEntry

    def apply_filters(self, rows: List[LoreEntry], filters: Dict[str, Any]) -> List[LoreEntry]:
        if filters.get('search'):
            term = filters['search']
            rows = [e for e in rows if matches_text(e.title, term) or matches_text(e.content, term)]
        if filters.get('era'):
            rows = [e for e in rows if e.era == filters['era']]
        if filters.get('category'):
            rows = [e for e in rows if e.category == filters['category']]
        return rows

    def sort_rows(self, rows: List[LoreEntry]) -> List[LoreEntry]:
        return sorted(rows, key=lambda e: e.year)

    def get_eras(self, rows: List[LoreEntry]) -> List[Dict[str, Any]]:
        """
        Summarise the eras present in a set of entries.
        
        Each era reports its earliest year and how many entries it holds;
        the list is sorted by that earliest year.
        """
        eras: Dict[str, Dict[str, Any]] = {}
        for entry in rows:
            # Entries without an era are grouped under the blank name
            era = entry.era or ""
            current = eras.get(era)
            if current is None:
                eras[era] = {"name": era, "year": entry.year, "count": 1}
            else:
                current["year"] = min(current["year"], entry.year)
                current["count"] += 1
        return sorted(eras.values(), key=lambda era: era["year"])
