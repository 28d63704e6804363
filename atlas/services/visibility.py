# atlas/services/visibility.py
"""
World-scoped visibility gate.

Decides, for one world and one viewer, which content rows are visible and
whether mutation is allowed at all. The owner of a world sees every row and may
mutate; everyone else (signed in or not) sees only rows explicitly flagged
public and may never mutate. Rows are returned whole or not at all.

The gate works on ORM rows and on plain dicts alike, so the client applies the
same rule to the payloads it receives.
"""
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional

from atlas.models.enums import ViewerRole


@dataclass(frozen=True)
class Viewer:
    """Identity of whoever is looking at a world"""
    user_id: Optional[str] = None
    email: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    @classmethod
    def anonymous(cls) -> "Viewer":
        return cls()


def _field(row: Any, name: str) -> Any:
    """Read a field from either a mapping or an attribute-style row"""
    if isinstance(row, Mapping):
        return row.get(name)
    return getattr(row, name, None)


def is_public_row(row: Any) -> bool:
    """A row is public only when its flag is explicitly True"""
    return _field(row, "is_public") is True


@dataclass(frozen=True)
class WorldAccess:
    """Outcome of running the gate for one (world, viewer) pair"""
    world_id: str
    viewer: Viewer
    is_owner: bool

    @property
    def role(self) -> ViewerRole:
        if self.is_owner:
            return ViewerRole.OWNER
        if self.viewer.is_authenticated:
            return ViewerRole.GUEST
        return ViewerRole.ANONYMOUS

    @property
    def can_mutate(self) -> bool:
        return self.is_owner

    def can_view(self, row: Any) -> bool:
        return self.is_owner or is_public_row(row)

    def visible(self, rows: Iterable[Any]) -> List[Any]:
        """Filter rows down to the ones this viewer may see, preserving order"""
        return [row for row in rows if self.can_view(row)]


def is_world_owner(world: Any, viewer: Viewer) -> bool:
    owner_id = _field(world, "owner_id")
    return viewer.is_authenticated and owner_id is not None and viewer.user_id == owner_id


def resolve_access(world: Any, viewer: Viewer) -> WorldAccess:
    """
    Run the gate for a world and a viewer.

    Args:
        world: World row (ORM object or dict) with id and owner_id.
        viewer: The current viewer; use Viewer.anonymous() when signed out.

    Returns:
        A fresh WorldAccess. Callers must re-run this on every world selection
        and every sign-in or sign-out.
    """
    return WorldAccess(
        world_id=_field(world, "id"),
        viewer=viewer,
        is_owner=is_world_owner(world, viewer)
    )


def can_open_world(world: Any, viewer: Viewer) -> bool:
    """The owner can always open a world; anyone else only a public one"""
    return is_world_owner(world, viewer) or is_public_row(world)
