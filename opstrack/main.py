"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from opstrack.config import Settings, get_settings
from opstrack.infrastructure.clock import MonotonicClock
from opstrack.infrastructure.database import Base, build_engine, build_session_factory
from opstrack.infrastructure.dependencies import build_user_service, open_entity_store
from opstrack.infrastructure.logging.log_config import setup_logging
from opstrack.infrastructure.memory import build_memory_store
from opstrack.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


def _ensure_sqlite_directory(database_url: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    prefix = "sqlite:///"
    if not database_url.startswith(prefix):
        return
    path = database_url[len(prefix):]
    if path and path != ":memory:":
        Path(path).parent.mkdir(parents=True, exist_ok=True)


async def _seed_admin_user(app: FastAPI) -> None:
    """Ensure the administrator account exists. Idempotent."""
    settings: Settings = app.state.settings
    try:
        async with open_entity_store(app) as store:
            await build_user_service(store, settings).ensure_admin(
                username=settings.admin_username,
                password=settings.admin_password,
                email=settings.admin_email,
            )
    except Exception as exc:
        logger.warning("Could not seed administrator '%s': %s", settings.admin_username, exc)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — create tables, seed the administrator."""
    settings: Settings = app.state.settings
    setup_logging(settings)

    engine = None
    if settings.storage_backend == "sql":
        _ensure_sqlite_directory(settings.database_url)
        engine = build_engine(settings.database_url, echo=(settings.log_level_sql.upper() == "DEBUG"))
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        app.state.session_factory = build_session_factory(engine)
        logger.info("Using SQL storage at %s", settings.database_url)
    else:
        logger.info("Using in-memory storage")

    if settings.seed_admin_user:
        await _seed_admin_user(app)

    yield

    # Shutdown
    if engine is not None:
        await engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.clock = MonotonicClock()
    if settings.storage_backend == "memory":
        app.state.memory_store = build_memory_store(app.state.clock)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "opstrack.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
