from typing import Optional
from pydantic import BaseModel, Field
from datetime import datetime

from atlas.models.enums import ViewerRole

class WorldBase(BaseModel):
    """Base world properties"""
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    map_url: Optional[str] = None
    is_public: bool = False

class WorldCreate(WorldBase):
    """Properties required to create a world"""
    pass

class WorldUpdate(BaseModel):
    """Properties that can be updated"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    map_url: Optional[str] = None
    is_public: Optional[bool] = None

class WorldResponse(WorldBase):
    """Response model with all world properties"""
    id: str
    owner_id: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class WorldDetailResponse(WorldResponse):
    """A world as seen by a particular viewer"""
    is_owner: bool
    role: ViewerRole
    share_url: str
