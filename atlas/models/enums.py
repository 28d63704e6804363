# atlas/models/enums.py
import enum


class NoteCategory(str, enum.Enum):
    NPC = "NPC"
    EVENT = "Event"
    CHARACTER = "Character"
    PLOT = "Plot"
    SECRET = "Secret"


class ViewerRole(str, enum.Enum):
    OWNER = "owner"
    GUEST = "guest"
    ANONYMOUS = "anonymous"
