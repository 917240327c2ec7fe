"""
Health check API route
"""

from datetime import datetime, timezone
from fastapi import APIRouter, HTTPException
from database.connection import get_db_pool

router = APIRouter()

@router.get("/health")
async def health_check():
    """Health check - verifies the database pool can run a query"""
    try:
        db_pool = get_db_pool()
        async with db_pool.acquire() as conn:
            await conn.fetchval("SELECT 1")

        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "database": "connected"
        }

    except Exception as e:
        # Only report unhealthy for actual infrastructure issues
        raise HTTPException(status_code=503, detail=f"Health check failed: {str(e)}")
