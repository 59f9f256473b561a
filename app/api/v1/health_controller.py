# External package imports
from fastapi import APIRouter

# Local application imports
from ...infrastructure.db.mongo_connection import ping_database


router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    """Report whether the backend and its database are reachable"""
    database_ok = await ping_database()
    return {
        "status": "ok",
        "database": "connected" if database_ok else "unavailable",
    }
