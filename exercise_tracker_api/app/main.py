"""
Main entrypoint for the Exercise Tracker API.

This module assembles the FastAPI application: logging, CORS, the API
router under ``/api``, the landing page, static assets served from
the site root, and the store lifecycle.  ``create_app`` builds and
configures the app, which is then instantiated at module import time
as ``app`` so it can be served directly::

    uvicorn exercise_tracker_api.app.main:app --reload
"""

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from .api.router import router as api_router
from .core.config import Settings, settings
from .core.db import Store
from .core.logging_config import setup_logging

BASE_DIR = Path(__file__).resolve().parent
VIEWS_DIR = BASE_DIR / "views"
PUBLIC_DIR = BASE_DIR / "public"

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module level ``settings``;
        tests pass one pointing at a temporary database.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.  The store is
        attached as ``app.state.store`` and connected on startup.
    """
    app_settings = app_settings or settings
    # Initialise logging before anything else so that the store and
    # routers can log during startup.
    setup_logging(app_settings)

    app = FastAPI(title=app_settings.project_name, version=app_settings.api_version)
    app.state.settings = app_settings
    app.state.store = Store(app_settings.database_url)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api")

    @app.get("/", include_in_schema=False)
    async def index() -> FileResponse:
        return FileResponse(VIEWS_DIR / "index.html")

    # Static assets are served from the site root, so this mount has to
    # come after every route or it would shadow them.
    app.mount("/", StaticFiles(directory=PUBLIC_DIR), name="public")

    @app.on_event("startup")
    async def startup_event() -> None:
        app.state.store.connect()

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        app.state.store.close()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
