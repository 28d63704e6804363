"""
Schema definitions for the application.
This module exports all schemas for easy importing throughout the app.
"""

# Import from base
from atlas.schemas.base import ContentResponse

# Import from auth
from atlas.schemas.auth import (
    Credentials, SignUpRequest, SignInRequest, RefreshTokenRequest, TokenResponse
)

# Import from worlds
from atlas.schemas.worlds import (
    WorldBase, WorldCreate, WorldUpdate, WorldResponse, WorldDetailResponse
)

# Import from locations
from atlas.schemas.locations import (
    LocationBase, LocationCreate, LocationUpdate, LocationPosition, LocationResponse
)

# Import from lore
from atlas.schemas.lore import (
    LoreBase, LoreCreate, LoreUpdate, LoreResponse, EraSummary
)

# Import from rules
from atlas.schemas.rules import (
    RuleBase, RuleCreate, RuleUpdate, RuleResponse
)

# Import from monsters
from atlas.schemas.monsters import (
    MonsterFeature, MonsterBase, MonsterCreate, MonsterUpdate, MonsterResponse
)

# Import from notes
from atlas.schemas.notes import (
    NoteBase, NoteCreate, NoteUpdate, NoteResponse
)
