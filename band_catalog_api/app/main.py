"""
Main entrypoint for the Band Catalog API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Run it with uvicorn or another ASGI server, e.g.::

    uvicorn band_catalog_api.app.main:app --reload

or simply ``python -m band_catalog_api``.
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import SQLiteStore, get_database_path
from .core.errors import register_error_handlers
from .core.logging_config import setup_logging


def create_app(store: Optional[SQLiteStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[SQLiteStore]
        Store handed to the services.  Defaults to a SQLite store at
        ``settings.database_url``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.store = store or SQLiteStore(get_database_path())

    register_error_handlers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list(),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file if it does not exist and brings the
        # schema up to date.
        app.state.store.ensure_schema()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
