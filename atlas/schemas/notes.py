from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator

from atlas.models.enums import NoteCategory
from atlas.schemas.base import ContentResponse

class NoteBase(BaseModel):
    """Base GM note properties"""
    title: str = Field(..., min_length=1, max_length=200)
    content: str = ""
    category: NoteCategory = NoteCategory.PLOT
    is_public: bool = False
    image_url: Optional[str] = None

class NoteCreate(NoteBase):
    pass

class NoteUpdate(BaseModel):
    """Properties that can be updated"""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    content: Optional[str] = None
    category: Optional[NoteCategory] = None
    is_public: Optional[bool] = None
    image_url: Optional[str] = None

class NoteResponse(ContentResponse):
    title: str
    content: str = ""
    category: NoteCategory
    image_url: Optional[str] = None

    @field_validator("content", mode="before")
    @classmethod
    def blank_content(cls, value: Any) -> Any:
        return "" if value is None else value
