"""
Main entrypoint for the Skill Sharing API.

This module assembles the FastAPI application, sets up logging and
includes the API router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn skill_sharing_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import settings
from .core.db import init_db
from .core.logging_config import setup_logging
from .services.user_service import UserService
from .stores.user_store import SQLiteUserStore, UserStore


def create_app(store: Optional[UserStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[UserStore]
        Store handed to ``UserService``.  Defaults to a
        ``SQLiteUserStore`` on ``settings.database_url``, whose
        migrations are applied at startup.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    if store is None:
        store = SQLiteUserStore()
    app.state.user_service = UserService(store, logging.getLogger("skill_sharing_api.users"))

    app.include_router(api_router, prefix="/api")

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file if needed and brings the schema up to date.
        if isinstance(store, SQLiteUserStore):
            version = init_db(store.db_path)
            logging.getLogger(__name__).info(
                "Database %s at schema version %s", store.db_path, version
            )

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
