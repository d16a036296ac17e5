"""
Configuration settings for the Blog Posts API
"""

import os
import logging

# Configure logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# Environment configuration
ENV = os.getenv("ENV", "PROD")  # PROD, QA or TEST
DATABASE_URL = os.getenv("DATABASE_URL", "mongodb://localhost:27017/blog-app")
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "mongodb://localhost:27017/test-blog-app")
PORT = int(os.getenv("PORT", 8080))

# How long the driver waits for a reachable server before failing a request
DB_SERVER_SELECTION_TIMEOUT_MS = int(os.getenv("DB_SERVER_SELECTION_TIMEOUT_MS", 5000))

# Collection holding blog post documents
POSTS_COLLECTION = os.getenv("POSTS_COLLECTION", "blogposts")

logger.info(f"Environment: {ENV}")

if DATABASE_URL == TEST_DATABASE_URL:
    logger.warning("DATABASE_URL and TEST_DATABASE_URL point at the same database")

# CORS settings
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]
