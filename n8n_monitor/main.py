"""
Entry point for the n8n monitor backend.

This script creates the FastAPI application, includes all API routers,
and registers the error handlers and CORS middleware. Run with:

    uvicorn n8n_monitor.main:app --reload

"""

from __future__ import annotations

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .core.db import engine
from .models import Base
from .scripts.run_migrations import run_migrations_to_head

from .api import api_router
from .core.config import settings, get_app_env, env_true
from .core.errors import log_exception, register_exception_handlers


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _configure_logging() -> None:
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)


def create_app() -> FastAPI:
    _configure_logging()
    app = FastAPI(title="n8n Monitor Backend", version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    # Include API routers
    app.include_router(api_router)

    @app.on_event("startup")
    def _init_db() -> None:
        logger = logging.getLogger("startup")
        env = get_app_env()
        if env_true("AUTO_CREATE_DB", "true"):
            try:
                Base.metadata.create_all(bind=engine)
            except Exception as exc:
                log_exception(logger, "DB create_all failed", exc=exc)
                if env == "prod":
                    raise
        if env_true("AUTO_RUN_MIGRATIONS", "false"):
            try:
                run_migrations_to_head()
            except Exception as exc:
                log_exception(logger, "DB migrations failed", exc=exc)
                if env == "prod":
                    raise
        logger.info("n8n monitor backend started env=%s", env)

    return app


app = create_app()
