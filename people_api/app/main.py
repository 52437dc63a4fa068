"""
Main entrypoint for the People API.

This module assembles the FastAPI application: it sets up logging,
builds the person store and service, registers the error handlers and
includes the versioned routers.  ``create_app`` returns a configured
application, which is instantiated at module import time as ``app``
so it can be served directly::

    uvicorn people_api.app.main:app --reload

Tests call ``create_app`` with their own settings, store and clock.
"""

import logging
from datetime import date
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import PersonStore
from .services.age_service import Clock
from .services.person_service import PersonService


logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[PersonStore] = None,
    clock: Clock = date.today,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration; the environment-derived module settings when
        omitted.
    store : Optional[PersonStore]
        Store shared by all requests of this application.  A new empty
        store is created when omitted.
    clock : Clock
        Returns "today" for age and salary calculations.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    service = PersonService(store if store is not None else PersonStore(), clock)
    if settings.seed_sample_data:
        service.seed_sample_data()
    app.state.person_service = service

    register_exception_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    logger.info("%s %s ready", settings.project_name, settings.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
