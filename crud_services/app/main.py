"""
Main entrypoint for both services.

``create_pelanggan_app`` and ``create_todo_app`` assemble a FastAPI
application each: logging is configured, routers and error handlers
are included, and a lifespan handler opens the store when the
application starts and closes it on shutdown.  Module-level instances
make the apps discoverable by uvicorn, e.g.::

    uvicorn crud_services.app.main:pelanggan_app --port 8080
    uvicorn crud_services.app.main:todo_app --port 8081
"""

import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .api.errors import register_error_handlers
from .api.router import build_pelanggan_router, build_todo_router
from .core.config import Settings, settings as default_settings
from .core.context import PelangganContext, TodoContext
from .core.db import init_pelanggan_db, init_todo_db, open_database
from .core.logging_config import setup_logging
from .services.todo_service import TodoService

logger = logging.getLogger(__name__)


def create_pelanggan_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create the customer browser application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the environment-derived defaults.

    Returns
    -------
    FastAPI
        A configured application.  The store is opened (and seeded if
        empty) when the application starts.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        conn = open_database(settings.pelanggan_database_url)
        init_pelanggan_db(conn, seed_count=settings.seed_count)
        app.state.context = PelangganContext(conn=conn)
        logger.info("Pelanggan service ready")
        try:
            yield
        finally:
            app.state.context.close()

    app = FastAPI(
        title=f"{settings.project_name} - Pelanggan",
        version=settings.api_version,
        lifespan=lifespan,
    )
    register_error_handlers(app)
    app.include_router(build_pelanggan_router(os.path.join(settings.static_dir, "pelanggan")))
    return app


def create_todo_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create the todo application.

    On startup the todo table is created if needed and loaded in full
    into the context cache.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        conn = open_database(settings.todo_database_url)
        init_todo_db(conn)
        ctx = TodoContext(conn=conn)
        TodoService.load_cache(ctx)
        app.state.context = ctx
        logger.info("Todo service ready")
        try:
            yield
        finally:
            ctx.close()

    app = FastAPI(
        title=f"{settings.project_name} - Todo",
        version=settings.api_version,
        lifespan=lifespan,
    )
    register_error_handlers(app)
    app.include_router(build_todo_router(os.path.join(settings.static_dir, "todo")))
    return app


# Created at import time so that uvicorn can discover them without
# calling the factories manually.  Nothing touches the database until
# an application actually starts.
pelanggan_app = create_pelanggan_app()
todo_app = create_todo_app()
