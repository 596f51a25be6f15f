"""Users Directory API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map AppError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager,
      tables created only when DATABASE_SYNC is enabled
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import characters, health, users
from app.config import get_settings
from app.infrastructure.database import init_db
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if settings.pooled:
        manager = init_db(
            settings.sqlalchemy_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
    else:
        manager = init_db(settings.sqlalchemy_url, pool_size=None)
    if settings.database_sync:
        await manager.create_schema()
        logger.info("Database schema synchronized")
    logger.info("Users API started")
    yield
    await manager.close()
    logger.info("Users API shutting down")


app = FastAPI(
    title="Users Directory API",
    description="CRUD for users plus a Rick and Morty characters proxy.",
    version="1.0.0",
    lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(users.router)
app.include_router(characters.router)

register_error_handlers(app)
