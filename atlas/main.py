# atlas/main.py
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
import logging

from atlas.api.v1.router import api_router
from atlas.database import engine, Base
from atlas.config import get_settings
from atlas.database_seeder import seed_database

# Get settings
settings = get_settings()

# Setup logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Create tables in the database
Base.metadata.create_all(bind=engine)

# Seed the database with initial data
seed_database()

# Initialize app
app = FastAPI(
    title="Campaign Atlas API",
    description="World-scoped maps, lore, rules, monsters and GM notes, using Supabase for authentication",
    version="0.1.0"
)

# CORS middleware for frontend access
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Replace with specific origins in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
async def root():
    """Health check and welcome message"""
    return {
        "message": "Welcome to the Campaign Atlas API",
        "status": "online",
        "version": "0.1.0"
    }


# Store failures surface their message; the rest of the app keeps serving
@app.exception_handler(SQLAlchemyError)
async def store_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Store error on {request.method} {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": f"Store error: {exc.__class__.__name__}"}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("atlas.main:app", host="0.0.0.0", port=8000, reload=True)
