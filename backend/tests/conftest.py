"""Root conftest — shared test configuration and fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test engine
    - Characters API never reached over the network: get_characters_client
      is overridden with an httpx.MockTransport-backed client
"""

import os

os.environ.setdefault("DATABASE_TYPE", "sqlite")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("CHARACTERS_API_URL", "https://characters.test/api")
os.environ.setdefault("CHARACTERS_API_LIVENESS_URL", "https://characters.test/api")

import httpx  # noqa: E402
import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

from app.api.dependencies import get_characters_client  # noqa: E402
from app.db.base import Base  # noqa: E402
from app.infrastructure.characters_client import CharactersClient  # noqa: E402
from app.infrastructure.database import get_db, DatabaseSessionManager  # noqa: E402
import app.infrastructure.database as db_module  # noqa: E402
from app.main import app  # noqa: E402
from app.repositories.user_repository import SqlAlchemyUserRepository  # noqa: E402
from app.services.user_service import UserService  # noqa: E402
from tests.factories import CHARACTERS_URL, make_user_data  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def test_manager(test_engine, test_session_factory):
    """DatabaseSessionManager bound to the per-test engine."""
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
def user_service(test_db):
    return UserService(SqlAlchemyUserRepository(test_db))


@pytest.fixture
def characters_routes():
    """Responses served by the fake characters API.

    Keys are (path, frozenset of query items); a None query matches any
    query string on that path. Values are (status_code, json_body).
    """
    return {}


@pytest.fixture
def characters_transport(characters_routes):
    def handler(request: httpx.Request) -> httpx.Response:
        query = frozenset(request.url.params.multi_items())
        path = request.url.path
        for key in ((path, query), (path, None)):
            if key in characters_routes:
                status_code, body = characters_routes[key]
                return httpx.Response(status_code, json=body)
        return httpx.Response(404, json={"error": "There is nothing here"})

    return httpx.MockTransport(handler)


@pytest.fixture
def characters_client(characters_transport):
    return CharactersClient(
        CHARACTERS_URL, liveness_url=CHARACTERS_URL,
        transport=characters_transport,
    )


@pytest.fixture
async def client(test_manager, characters_client):
    """FastAPI test client with DB and characters API dependencies overridden."""
    async def override_get_db():
        async with test_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_characters_client] = lambda: characters_client

    # /health/readiness reads db_manager directly
    original_manager = db_module.db_manager
    db_module.db_manager = test_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def seed_users(user_service):
    """Insert n users with distinct emails; returns the stored entities."""
    async def _seed(n: int) -> list:
        return [
            await user_service.create(make_user_data(email=f"user{i}@mail.com"))
            for i in range(n)
        ]
    return _seed
