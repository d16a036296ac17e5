"""
Blog Posts API Server
CRUD resource over blog posts stored in MongoDB
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import ALLOWED_ORIGINS, DATABASE_URL
from database.connection import init_database, close_database
from api.routes import health, posts
from utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)


async def run_server(database_url: str = DATABASE_URL, client=None) -> FastAPI:
    """
    Connect the app to its document store

    Args:
        database_url: Connection string of the store to serve from
        client: Optional motor-compatible client to use instead of connecting

    Returns:
        The ASGI application, ready to serve requests
    """
    await init_database(database_url, client=client)
    logger.info("Blog Posts API ready")
    return app


async def close_server():
    """Disconnect the app from its document store"""
    await close_database()
    logger.info("Blog Posts API stopped")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    await run_server(DATABASE_URL)
    yield
    await close_server()

# FastAPI app initialization
app = FastAPI(
    title="Blog Posts API",
    description="CRUD API for blog posts",
    version="1.0.0",
    lifespan=lifespan
)


# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# Setup centralized error handling
setup_error_handling(app)

# Include API routes
app.include_router(health.router, tags=["Health"])
app.include_router(posts.router, prefix="/posts", tags=["Posts"])
app.include_router(posts.legacy_router, tags=["Posts"])

# Server startup is handled by main.py at the project root
