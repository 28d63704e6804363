# atlas/models/mixins.py
from datetime import datetime, timezone
from sqlalchemy import Column, DateTime, Boolean
from sqlalchemy.sql import func
import uuid


def generate_uuid():
    """Generate a UUID string for use as a primary key"""
    return str(uuid.uuid4())


def utc_now():
    # Set in Python for sub-second precision; SQLite's CURRENT_TIMESTAMP stops at seconds
    return datetime.now(timezone.utc)


class TimestampMixin:
    """Mixin to add created_at and updated_at columns to models"""
    created_at = Column(DateTime(timezone=True), default=utc_now, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utc_now, server_default=func.now(), onupdate=utc_now, nullable=False)


class VisibilityMixin:
    """Mixin for rows that guests may see once flagged public"""
    is_public = Column(Boolean, default=False, nullable=False)
