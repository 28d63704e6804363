from typing import Any, List, Optional
from pydantic import BaseModel, Field, field_validator

from atlas.schemas.base import ContentResponse, as_list

class RuleBase(BaseModel):
    """Base rule properties"""
    name: str = Field(..., min_length=1, max_length=100)
    category: str = "Conditions"
    description: str = ""
    details: List[str] = Field(default_factory=list)
    is_public: bool = False

class RuleCreate(RuleBase):
    pass

class RuleUpdate(BaseModel):
    """Properties that can be updated"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    category: Optional[str] = None
    description: Optional[str] = None
    details: Optional[List[str]] = None
    is_public: Optional[bool] = None

class RuleResponse(ContentResponse):
    name: str
    category: Optional[str] = None
    description: str = ""
    details: List[str] = Field(default_factory=list)
    is_baseline: bool = False

    @field_validator("details", mode="before")
    @classmethod
    def coerce_details(cls, value: Any) -> List[Any]:
        return as_list(value)

    @field_validator("description", mode="before")
    @classmethod
    def blank_description(cls, value: Any) -> Any:
        return "" if value is None else value
