# atlas/models/rule.py
from sqlalchemy import Column, String, Text, JSON, ForeignKey
from sqlalchemy.orm import relationship
from atlas.database import Base
from atlas.models.mixins import TimestampMixin, VisibilityMixin, generate_uuid

class RuleEntry(Base, TimestampMixin, VisibilityMixin):
    __tablename__ = "rules"
    
    id = Column(String(36), primary_key=True, default=generate_uuid, index=True)
    # NULL for the baseline rules shared by every world
    world_id = Column(String(36), ForeignKey("worlds.id", ondelete="CASCADE"), nullable=True, index=True)
    name = Column(String(100), nullable=False)
    category = Column(String(50), nullable=True)
    description = Column(Text, nullable=True)
    details = Column(JSON, nullable=True)
    
    world = relationship("World", back_populates="rules")
    
    @property
    def is_baseline(self) -> bool:
        return self.world_id is None
    
    def __repr__(self):
        return f"<RuleEntry {self.id} - {self.name}>"
