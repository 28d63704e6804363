# atlas/models/lore.py
from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from atlas.database import Base
from atlas.models.mixins import TimestampMixin, VisibilityMixin, generate_uuid

DEFAULT_LORE_YEAR = 1490

class LoreEntry(Base, TimestampMixin, VisibilityMixin):
    __tablename__ = "lore_entries"
    
    id = Column(String(36), primary_key=True, default=generate_uuid, index=True)
    world_id = Column(String(36), ForeignKey("worlds.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=True)
    era = Column(String(100), nullable=True)
    year = Column(Integer, nullable=False, default=DEFAULT_LORE_YEAR)
    category = Column(String(50), nullable=True)
    image_url = Column(String(500), nullable=True)
    
    world = relationship("World", back_populates="lore_entries")
    
    def __repr__(self):
        return f"<LoreEntry {self.id} - {self.title} ({self.year})>"
