# atlas/database.py
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from supabase import create_client, Client

from atlas.config import get_settings

settings = get_settings()

# SQLite connections are shared across the request threadpool
connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

# Create SQLAlchemy engine and session factory
engine = create_engine(settings.DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# SQLAlchemy Base
Base = declarative_base()


@lru_cache()
def get_supabase() -> Client:
    """Supabase client used for the auth platform calls"""
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)


# Dependency to get DB session
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
