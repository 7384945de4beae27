"""
Main entrypoint for the User Admin API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Run it with uvicorn or another ASGI server, e.g.::

    uvicorn user_admin_api.app.main:app --reload

The application title, version and API prefix come from ``Settings``
in ``core.config``.
"""

from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.exception_handlers import register_exception_handlers
from .core.logging_config import setup_logging
from .services.user_service import SAMPLE_USERS, UserService


def create_app(
    settings: Optional[Settings] = None,
    user_service: Optional[UserService] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the process-wide settings
        read from the environment.
    user_service : Optional[UserService]
        User store to serve.  When omitted a new store is created,
        seeded with the sample users if ``settings.seed_sample_users``
        is set.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    if user_service is None:
        user_service = UserService(SAMPLE_USERS if settings.seed_sample_users else None)
    app.state.user_service = user_service
    app.state.debug = settings.debug

    register_exception_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
