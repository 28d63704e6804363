# atlas/models/world.py
from sqlalchemy import Column, String, Text, Boolean
from sqlalchemy.orm import relationship
from atlas.database import Base
from atlas.models.mixins import TimestampMixin, generate_uuid

class World(Base, TimestampMixin):
    __tablename__ = "worlds"
    
    id = Column(String(36), primary_key=True, default=generate_uuid, index=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    map_url = Column(String(500), nullable=True)
    is_public = Column(Boolean, default=False, nullable=False)
    
    # Users live in the auth platform, so there is no local foreign key
    owner_id = Column(String(36), nullable=False, index=True)
    
    # Relationships
    locations = relationship("Location", back_populates="world", cascade="all, delete-orphan")
    lore_entries = relationship("LoreEntry", back_populates="world", cascade="all, delete-orphan")
    rules = relationship("RuleEntry", back_populates="world", cascade="all, delete-orphan")
    monsters = relationship("Monster", back_populates="world", cascade="all, delete-orphan")
    notes = relationship("DMNote", back_populates="world", cascade="all, delete-orphan")
    
    def __repr__(self):
        return f"<World {self.id} - {self.name}>"
