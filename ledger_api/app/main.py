"""
Main entrypoint for the Ledger API.

This module assembles the FastAPI application: logging, CORS, error
handlers and the versioned routers.  ``create_app`` builds an app from
explicit settings (handy in tests) or from the environment; the module
level ``app`` is what ASGI servers import, e.g.::

    uvicorn ledger_api.app.main:app --reload
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.router import router as v1_router
from .core.clock import Clock, local_now
from .core.config import Settings, settings as default_settings
from .core.db import Database
from .core.errors import install_error_handlers
from .core.logging_config import setup_logging


def create_app(settings: Optional[Settings] = None, clock: Optional[Clock] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time.
    clock : Optional[Clock]
        Source of the current local time used to date transactions.
        Defaults to ``datetime.now``.

    Returns
    -------
    FastAPI
        A configured application.  The database is migrated when the
        application starts.
    """
    settings = settings or default_settings
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.database = Database(settings.database_url)
    app.state.clock = clock or local_now

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_error_handlers(app, expose_store_errors=settings.debug)
    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event() -> None:
        app.state.database.init()

    return app


# Created at import time so that uvicorn can discover it without
# calling create_app manually.
app = create_app()
