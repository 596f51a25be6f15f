"""Route Dependencies — wire repositories, services and clients for FastAPI.

Invariants:
    - One UserService per request, bound to that request's DB session
    - CharactersClient built from settings; overridable in tests
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.infrastructure.characters_client import CharactersClient
from app.infrastructure.database import get_db
from app.repositories.user_repository import SqlAlchemyUserRepository
from app.services.user_service import UserService


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(SqlAlchemyUserRepository(db))


def get_characters_client() -> CharactersClient:
    settings = get_settings()
    return CharactersClient(
        settings.characters_api_url,
        liveness_url=settings.characters_api_liveness_url,
        timeout_seconds=settings.characters_api_timeout_seconds,
    )
