"""
Main entrypoint for the Donation Tracker API.

This module assembles the FastAPI application, sets up logging,
registers the exception handlers and includes the versioned routers.
``create_app`` builds and configures an app around a donation store;
the store is created here unless one is passed in, which keeps tests
isolated from each other.  A default instance is created at import
time as ``app`` so it can be served directly::

    uvicorn donation_tracker.app.main:app --reload
"""

import logging
import time
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.router import build_router
from .core.config import Settings, settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .services.donation_service import SAMPLE_DONATIONS, DonationStore


def create_app(
    store: Optional[DonationStore] = None,
    app_settings: Optional[Settings] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[DonationStore]
        Store backing the donation endpoints.  When omitted a new
        store is created, seeded with sample donations if
        ``seed_sample_data`` is enabled.
    app_settings : Optional[Settings]
        Settings to use instead of the module level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    # Initialise logging before anything else so that setup below can
    # safely log messages.
    setup_logging(app_settings.log_level, app_settings.log_file or None, app_settings.environment)

    if store is None:
        store = DonationStore(seed=SAMPLE_DONATIONS if app_settings.seed_sample_data else None)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        description=app_settings.description,
        debug=app_settings.debug,
    )
    app.state.settings = app_settings
    app.state.donation_store = store
    app.state.started_at = time.monotonic()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origin_list,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        allow_credentials=True,
    )
    register_exception_handlers(app)
    app.include_router(build_router(app_settings.api_prefix))

    logging.getLogger(__name__).info(
        "%s %s ready (%s, %d donations loaded)",
        app_settings.project_name,
        app_settings.api_version,
        app_settings.environment,
        len(store),
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
