# atlas/models/location.py
from sqlalchemy import Column, Integer, Float, String, Text, JSON, ForeignKey
from sqlalchemy.orm import relationship
from atlas.database import Base
from atlas.models.mixins import TimestampMixin, VisibilityMixin, generate_uuid

DEFAULT_MARKER_SIZE = 25

class Location(Base, TimestampMixin, VisibilityMixin):
    __tablename__ = "locations"
    
    id = Column(String(36), primary_key=True, default=generate_uuid, index=True)
    world_id = Column(String(36), ForeignKey("worlds.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    x = Column(Float, nullable=False, default=0.0)
    y = Column(Float, nullable=False, default=0.0)
    description = Column(Text, nullable=True)
    taverns = Column(JSON, nullable=True)
    shops = Column(JSON, nullable=True)
    npcs = Column(JSON, nullable=True)
    size = Column(Integer, default=DEFAULT_MARKER_SIZE)
    image_url = Column(String(500), nullable=True)
    
    world = relationship("World", back_populates="locations")
    
    def __repr__(self):
        return f"<Location {self.id} - {self.name} ({self.x}, {self.y})>"
