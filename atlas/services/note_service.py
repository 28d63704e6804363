# atlas/services/note_service.py
from typing import List, Dict, Any

from atlas.models.note import DMNote
from atlas.services.content_service import ContentService, matches_text


class NoteService(ContentService):
    """Service for GM notes; newest first"""

    model = DMNote

    def apply_filters(self, rows: List[DMNote], filters: Dict[str, Any]) -> List[DMNote]:
        if filters.get('search'):
            term = filters['search']
            rows = [n for n in rows if matches_text(n.title, term) or matches_text(n.content, term)]
        if filters.get('category'):
            rows = [n for n in rows if n.category == filters['category']]
        return rows

    def sort_rows(self, rows: List[DMNote]) -> List[DMNote]:
        return sorted(rows, key=lambda n: n.created_at, reverse=True)
