# atlas/api/v1/router.py
from fastapi import APIRouter
from atlas.api.v1 import auth, worlds, locations, lore, rules, monsters, notes

# Create the main router
api_router = APIRouter()

# Include all the sub-routers
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(worlds.router, prefix="/worlds", tags=["worlds"])
api_router.include_router(locations.router, prefix="/worlds/{world_id}/locations", tags=["locations"])
api_router.include_router(lore.router, prefix="/worlds/{world_id}/lore", tags=["lore"])
api_router.include_router(rules.router, prefix="/worlds/{world_id}/rules", tags=["rules"])
api_router.include_router(monsters.router, prefix="/worlds/{world_id}/monsters", tags=["monsters"])
api_router.include_router(notes.router, prefix="/worlds/{world_id}/notes", tags=["notes"])
