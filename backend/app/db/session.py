from collections.abc import AsyncGenerator

from fastapi import FastAPI, Request
from loguru import logger
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from backend.app.core.config import Settings
from backend.app.core.errors import ErrorKind, GENERIC_ERROR_MESSAGE, ReservationError
from backend.app.db.models import Base


class Database:
    """The process-wide engine and session factory, created once at startup."""

    def __init__(self, url: str):
        engine_kwargs: dict = {"pool_pre_ping": True}
        # SQLite (tests, local dev) doesn't take QueuePool sizing
        if make_url(url).get_backend_name() != "sqlite":
            engine_kwargs.update(pool_size=5, max_overflow=10)

        self.engine: AsyncEngine = create_async_engine(url, **engine_kwargs)
        self.sessionmaker = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def ping(self) -> None:
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def create_tables(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


async def init_database(app: FastAPI, settings: Settings) -> Database:
    """Connect to the database and attach it to the app; failure is fatal."""
    database = Database(settings.DATABASE_URL)
    try:
        await database.ping()
        if settings.DB_CREATE_TABLES:
            await database.create_tables()
    except Exception:
        logger.opt(exception=True).critical("Could not connect to the database")
        await database.dispose()
        raise

    app.state.database = database
    logger.info(f"Connected to database ({make_url(settings.DATABASE_URL).get_backend_name()})")
    return database


async def close_database(app: FastAPI) -> None:
    """Dispose of the engine if it was initialised."""
    database: Database | None = getattr(app.state, "database", None)
    if database is not None:
        await database.dispose()
        app.state.database = None
        logger.info("Database connection closed")


def get_database(request: Request) -> Database:
    database: Database | None = getattr(request.app.state, "database", None)
    if database is None:
        raise ReservationError(ErrorKind.PERSISTENCE, GENERIC_ERROR_MESSAGE)
    return database


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield a scoped AsyncSession for request handling."""
    async with get_database(request).sessionmaker() as session:
        yield session
