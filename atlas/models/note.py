# atlas/models/note.py
from sqlalchemy import Column, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from atlas.database import Base
from atlas.models.mixins import TimestampMixin, VisibilityMixin, generate_uuid
from atlas.models.enums import NoteCategory

class DMNote(Base, TimestampMixin, VisibilityMixin):
    __tablename__ = "dm_notes"
    
    id = Column(String(36), primary_key=True, default=generate_uuid, index=True)
    world_id = Column(String(36), ForeignKey("worlds.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=True)
    # Stored as the NoteCategory value; validated by the note schemas
    category = Column(String(20), nullable=False, default=NoteCategory.PLOT.value)
    image_url = Column(String(500), nullable=True)
    
    world = relationship("World", back_populates="notes")
    
    def __repr__(self):
        return f"<DMNote {self.id} - {self.title} [{self.category}]>"
