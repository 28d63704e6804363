# atlas/config.py
from pydantic_settings import BaseSettings
from functools import lru_cache
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    # Supabase configuration
    SUPABASE_URL: str
    SUPABASE_KEY: str
    SUPABASE_JWT_SECRET: str
    
    # Database
    DATABASE_URL: str = "sqlite:///./atlas.db"
    
    # API configuration
    API_PREFIX: str = "/api/v1"
    
    # Front-end base URL, used to build shareable world links
    APP_URL: str = "http://localhost:5173"
    
    # Content defaults
    DEFAULT_MAP_URL: str = "https://media.wizards.com/2015/images/dnd/resources/Sword-Coast-Map_HighRes.jpg"
    SEED_BASELINE_RULES: bool = True
    
    LOG_LEVEL: str = "INFO"
    
    class Config:
        env_file = ".env"


@lru_cache()
def get_settings():
    return Settings()
