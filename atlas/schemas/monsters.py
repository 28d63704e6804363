from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator

from atlas.schemas.base import ContentResponse, as_list

class MonsterFeature(BaseModel):
    """A named ability, action or legendary action"""
    name: str
    desc: str = ""

class MonsterBase(BaseModel):
    """Base stat block"""
    name: str = Field(..., min_length=1, max_length=100)
    slug: Optional[str] = Field(None, max_length=120)
    size: str = "Medium"
    type: str = "Humanoid"
    challenge_rating: str = "1"
    armor_class: int = Field(10, ge=0)
    hit_points: int = Field(10, ge=0)
    alignment: str = "Unaligned"
    strength: int = Field(10, ge=1, le=30)
    dexterity: int = Field(10, ge=1, le=30)
    constitution: int = Field(10, ge=1, le=30)
    intelligence: int = Field(10, ge=1, le=30)
    wisdom: int = Field(10, ge=1, le=30)
    charisma: int = Field(10, ge=1, le=30)
    speed: Dict[str, Any] = Field(default_factory=lambda: {"walk": 30})
    senses: str = ""
    languages: str = "Common"
    special_abilities: List[MonsterFeature] = Field(default_factory=list)
    actions: List[MonsterFeature] = Field(default_factory=list)
    legendary_actions: List[MonsterFeature] = Field(default_factory=list)
    is_homebrew: bool = True
    is_public: bool = False

class MonsterCreate(MonsterBase):
    pass

class MonsterUpdate(BaseModel):
    """Properties that can be updated"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    slug: Optional[str] = Field(None, max_length=120)
    size: Optional[str] = None
    type: Optional[str] = None
    challenge_rating: Optional[str] = None
    armor_class: Optional[int] = Field(None, ge=0)
    hit_points: Optional[int] = Field(None, ge=0)
    alignment: Optional[str] = None
    strength: Optional[int] = Field(None, ge=1, le=30)
    dexterity: Optional[int] = Field(None, ge=1, le=30)
    constitution: Optional[int] = Field(None, ge=1, le=30)
    intelligence: Optional[int] = Field(None, ge=1, le=30)
    wisdom: Optional[int] = Field(None, ge=1, le=30)
    charisma: Optional[int] = Field(None, ge=1, le=30)
    speed: Optional[Dict[str, Any]] = None
    senses: Optional[str] = None
    languages: Optional[str] = None
    special_abilities: Optional[List[MonsterFeature]] = None
    actions: Optional[List[MonsterFeature]] = None
    legendary_actions: Optional[List[MonsterFeature]] = None
    is_homebrew: Optional[bool] = None
    is_public: Optional[bool] = None

class MonsterResponse(ContentResponse):
    slug: str
    name: str
    size: Optional[str] = None
    type: Optional[str] = None
    challenge_rating: Optional[str] = None
    armor_class: int = 10
    hit_points: int = 10
    alignment: Optional[str] = None
    strength: int = 10
    dexterity: int = 10
    constitution: int = 10
    intelligence: int = 10
    wisdom: int = 10
    charisma: int = 10
    speed: Dict[str, Any] = Field(default_factory=dict)
    senses: str = ""
    languages: str = ""
    special_abilities: List[MonsterFeature] = Field(default_factory=list)
    actions: List[MonsterFeature] = Field(default_factory=list)
    legendary_actions: List[MonsterFeature] = Field(default_factory=list)
    is_homebrew: bool = True

    @field_validator("special_abilities", "actions", "legendary_actions", mode="before")
    @classmethod
    def coerce_features(cls, value: Any) -> List[Any]:
        return as_list(value)

    @field_validator("speed", mode="before")
    @classmethod
    def coerce_speed(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else {}

    @field_validator("senses", "languages", mode="before")
    @classmethod
    def blank_text(cls, value: Any) -> Any:
        return "" if value is None else value
