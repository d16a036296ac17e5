"""
Health check API route
"""

from datetime import datetime, timezone
from fastapi import APIRouter, HTTPException
from config.settings import POSTS_COLLECTION
from database.connection import get_database

router = APIRouter()

@router.get("/health")
async def health_check():
    """Health check - verifies the document store answers"""
    try:
        await get_database()[POSTS_COLLECTION].find_one({})

        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "database": "connected"
        }

    except Exception as e:
        raise HTTPException(status_code=503, detail=f"Health check failed: {str(e)}")
