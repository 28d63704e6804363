# atlas/models/monster.py
from sqlalchemy import Column, Integer, String, Text, JSON, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from atlas.database import Base
from atlas.models.mixins import TimestampMixin, VisibilityMixin, generate_uuid

class Monster(Base, TimestampMixin, VisibilityMixin):
    __tablename__ = "homebrew_monsters"
    
    id = Column(String(36), primary_key=True, default=generate_uuid, index=True)
    world_id = Column(String(36), ForeignKey("worlds.id", ondelete="CASCADE"), nullable=False, index=True)
    slug = Column(String(120), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    size = Column(String(20), default="Medium")
    type = Column(String(50), default="Humanoid")
    challenge_rating = Column(String(10), default="1")
    armor_class = Column(Integer, default=10)
    hit_points = Column(Integer, default=10)
    alignment = Column(String(50), default="Unaligned")
    
    # Ability scores
    strength = Column(Integer, default=10)
    dexterity = Column(Integer, default=10)
    constitution = Column(Integer, default=10)
    intelligence = Column(Integer, default=10)
    wisdom = Column(Integer, default=10)
    charisma = Column(Integer, default=10)
    
    speed = Column(JSON, nullable=True)
    senses = Column(Text, nullable=True)
    languages = Column(Text, nullable=True)
    special_abilities = Column(JSON, nullable=True)
    actions = Column(JSON, nullable=True)
    legendary_actions = Column(JSON, nullable=True)
    is_homebrew = Column(Boolean, default=True, nullable=False)
    
    world = relationship("World", back_populates="monsters")
    
    def __repr__(self):
        return f"<Monster {self.id} - {self.name} (CR {self.challenge_rating})>"
