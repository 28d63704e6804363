from typing import Any, List, Optional
from pydantic import BaseModel, Field, field_validator

from atlas.models.location import DEFAULT_MARKER_SIZE
from atlas.schemas.base import ContentResponse, as_list

class LocationBase(BaseModel):
    """Base location properties"""
    name: str = Field(..., min_length=1, max_length=100)
    x: float
    y: float
    description: Optional[str] = None
    taverns: List[str] = Field(default_factory=list)
    shops: List[str] = Field(default_factory=list)
    npcs: List[str] = Field(default_factory=list)
    size: int = Field(DEFAULT_MARKER_SIZE, ge=1)
    is_public: bool = False
    image_url: Optional[str] = None

class LocationCreate(LocationBase):
    """Properties required to pin a new location"""
    pass

class LocationUpdate(BaseModel):
    """Properties that can be updated"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    x: Optional[float] = None
    y: Optional[float] = None
    description: Optional[str] = None
    taverns: Optional[List[str]] = None
    shops: Optional[List[str]] = None
    npcs: Optional[List[str]] = None
    size: Optional[int] = Field(None, ge=1)
    is_public: Optional[bool] = None
    image_url: Optional[str] = None

class LocationPosition(BaseModel):
    """New marker position after a drag"""
    x: float
    y: float

class LocationResponse(ContentResponse):
    """Location as stored, normalised for the map"""
    name: str
    x: float
    y: float
    description: Optional[str] = None
    taverns: List[str] = Field(default_factory=list)
    shops: List[str] = Field(default_factory=list)
    npcs: List[str] = Field(default_factory=list)
    size: int = DEFAULT_MARKER_SIZE
    image_url: Optional[str] = None

    @field_validator("taverns", "shops", "npcs", mode="before")
    @classmethod
    def coerce_lists(cls, value: Any) -> List[Any]:
        return as_list(value)

    @field_validator("size", mode="before")
    @classmethod
    def default_size(cls, value: Any) -> Any:
        return value or DEFAULT_MARKER_SIZE
