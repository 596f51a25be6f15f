"""Health Checks — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/liveness always returns 200 if the process is up
    - GET /health/readiness returns 503 if the database or the characters API is down
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.api.dependencies import get_characters_client
from app.infrastructure import database
from app.infrastructure.characters_client import CharactersClient

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["Health"])


@router.get("/liveness", status_code=status.HTTP_200_OK)
async def liveness():
    """Returns 200 whenever the process is serving requests."""
    return {"status": "up"}


@router.get("/readiness")
async def readiness(
    characters: CharactersClient = Depends(get_characters_client),
):
    """Database connectivity and characters API liveness."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    api_ok = await characters.is_alive()
    checks = {
        "database": "up" if db_ok else "down",
        "charactersApi": "up" if api_ok else "down",
    }
    if not (db_ok and api_ok):
        logger.warning(f"Readiness check failed: {checks}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "down", "checks": checks},
        )
    return {"status": "up", "checks": checks}
