# atlas/services/rule_service.py
from sqlalchemy import or_
from typing import List, Dict, Any

from atlas.models.rule import RuleEntry
from atlas.services.content_service import ContentService, matches_text
from atlas.services.visibility import WorldAccess


class RuleService(ContentService):
    """
    Service for rules.
    
    A world's rule listing is its own rules plus the baseline rules shared by
    every world. Baseline rows are readable by anyone and are never reachable
    through the per-world get/update/delete paths.
    """

    model = RuleEntry

    def get_rows(self, world_id: str) -> List[RuleEntry]:
        return self.db.query(RuleEntry).filter(
            or_(
                RuleEntry.world_id == world_id,
                RuleEntry.world_id.is_(None)
            )
        ).all()

    def get_baseline_rules(self) -> List[RuleEntry]:
        return self.db.query(RuleEntry).filter(RuleEntry.world_id.is_(None)).all()

    def list_visible(self, access: WorldAccess, filters: Dict[str, Any] = None) -> List[RuleEntry]:
        rows = [r for r in self.get_rows(access.world_id) if r.is_baseline or access.can_view(r)]
        if filters:
            rows = self.apply_filters(rows, filters)
        return self.sort_rows(rows)

    def apply_filters(self, rows: List[RuleEntry], filters: Dict[str, Any]) -> List[RuleEntry]:
        if filters.get('search'):
            term = filters['search']
            rows = [r for r in rows if matches_text(r.name, term) or matches_text(r.description, term)]
        if filters.get('category'):
            rows = [r for r in rows if r.category == filters['category']]
        return rows

    def sort_rows(self, rows: List[RuleEntry]) -> List[RuleEntry]:
        return sorted(rows, key=lambda r: ((r.category or "").lower(), (r.name or "").lower()))

    def get_categories(self, rows: List[RuleEntry]) -> List[str]:
        """Distinct categories, in first-seen order."""
        categories = []
        for rule in rows:
            if rule.category and rule.category not in categories:
                categories.append(rule.category)
        return categories
