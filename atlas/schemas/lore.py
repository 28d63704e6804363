from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator

from atlas.models.lore import DEFAULT_LORE_YEAR
from atlas.schemas.base import ContentResponse

class LoreBase(BaseModel):
    """Base lore entry properties"""
    title: str = Field(..., min_length=1, max_length=200)
    content: str = ""
    era: str = ""
    year: int = DEFAULT_LORE_YEAR
    category: str = "History"
    is_public: bool = False
    image_url: Optional[str] = None

class LoreCreate(LoreBase):
    pass

class LoreUpdate(BaseModel):
    """Properties that can be updated"""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    content: Optional[str] = None
    era: Optional[str] = None
    year: Optional[int] = None
    category: Optional[str] = None
    is_public: Optional[bool] = None
    image_url: Optional[str] = None

class LoreResponse(ContentResponse):
    title: str
    content: str = ""
    era: str = ""
    year: int = DEFAULT_LORE_YEAR
    category: Optional[str] = None
    image_url: Optional[str] = None

    @field_validator("content", "era", mode="before")
    @classmethod
    def blank_text(cls, value: Any) -> Any:
        return "" if value is None else value

class EraSummary(BaseModel):
    """An era on the lore timeline"""
    name: str
    year: int
    count: int
