"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from sqlalchemy.engine import Engine

from arcade import __version__
from arcade.api.errors import register_exception_handlers
from arcade.api.health import router as health_router
from arcade.api.items import router as item_router
from arcade.api.links import router as link_router
from arcade.api.players import router as player_router
from arcade.api.rooms import router as room_router
from arcade.api.users import router as user_router
from arcade.config import settings
from arcade.core.logging import get_logger, setup_logging
from arcade.db.database import engine as default_engine
from arcade.db.database import init_db

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


def create_app(db_engine: Engine | None = None) -> FastAPI:
    """Build the application; tables and sentinels are created on startup."""
    db_engine = db_engine or default_engine

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("Creating database tables...")
        init_db(db_engine)
        logger.info("Database ready (%s).", db_engine.dialect.name)
        yield
        logger.info("Shutting down...")

    app = FastAPI(title="Arcade", version=__version__, lifespan=lifespan)
    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(player_router)
    app.include_router(room_router)
    app.include_router(item_router)
    app.include_router(link_router)
    app.include_router(user_router)
    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    uvicorn.run(
        "arcade.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
