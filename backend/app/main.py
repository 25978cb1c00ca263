from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from backend.app.core.config import Settings, settings
from backend.app.core.errors import register_exception_handlers
from backend.app.core.logger_config import configure_logging
from backend.app.db.session import close_database, init_database
import backend.app.routers.health as health
import backend.app.routers.reservations as reservations


def create_app(app_settings: Settings | None = None) -> FastAPI:
    app_settings = app_settings or settings
    configure_logging(app_settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await init_database(app, app_settings)
        logger.info(f"Accepting reservations under {app_settings.API_PREFIX}")
        try:
            yield
        finally:
            await close_database(app)

    app = FastAPI(
        title="Restaurant Reservations API",
        lifespan=lifespan,
    )
    app.state.settings = app_settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[app_settings.FRONTEND_URL],
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(health.router, prefix=app_settings.API_PREFIX)
    app.include_router(reservations.router, prefix=app_settings.API_PREFIX)
    return app


app = create_app()


def run() -> None:
    # log_config=None keeps uvicorn on the loguru intercept set up above
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
