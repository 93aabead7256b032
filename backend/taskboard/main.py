import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.errors import register_error_handlers
from .api.v1 import events, health, tasks
from .core.config import Settings, settings as default_settings
from .core.logging_setup import setup_logging
from .db.session import Database

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
    configure_logging: bool = True,
) -> FastAPI:
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if configure_logging:
            setup_logging(settings.LOG_LEVEL)
        db = database or Database(settings.DATABASE_URL, echo=settings.DB_ECHO)
        db.init_db()
        app.state.db = db
        logger.info("%s started (env=%s)", settings.APP_NAME, settings.RUN_ENV)
        try:
            yield
        finally:
            db.dispose()
            logger.info("%s stopped", settings.APP_NAME)

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(tasks.router,  prefix=settings.API_V1_PREFIX)
    app.include_router(events.router, prefix=settings.API_V1_PREFIX)
    return app


app = create_app()
