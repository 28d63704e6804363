from typing import Any, List, Optional
from datetime import datetime
from pydantic import BaseModel, field_validator


def as_list(value: Any) -> List[Any]:
    """Store rows may carry NULL or a scalar where a list is expected"""
    return value if isinstance(value, list) else []


class ContentResponse(BaseModel):
    """Fields shared by every world-scoped content row"""
    id: str
    world_id: Optional[str] = None
    is_public: bool = False
    created_at: datetime
    updated_at: datetime

    @field_validator("is_public", mode="before")
    @classmethod
    def missing_flag_is_private(cls, value: Any) -> Any:
        return False if value is None else value

    class Config:
        from_attributes = True
