from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .middleware.request_logging import RequestLoggingMiddleware
from .routes.system import router as system_router
from .tracking.router import BadGraphQLRequest, bad_graphql_request_handler
from .tracking.router import router as tracking_router
from .tracking.store import RouteStore
from .utils.settings import Settings, load_settings

logger = logging.getLogger(__name__)


def create_app(
    store: Optional[RouteStore] = None, settings: Optional[Settings] = None
) -> FastAPI:
    """Build the application around a single shared route store."""
    settings = settings or load_settings()

    app = FastAPI(title="Track API", version=__version__)
    app.state.store = store if store is not None else RouteStore()
    app.add_exception_handler(BadGraphQLRequest, bad_graphql_request_handler)

    app.include_router(tracking_router)
    app.include_router(system_router)

    if settings.allowed_origins:
        logger.info(f"CORS enabled for origins: {', '.join(settings.allowed_origins)}")
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.allowed_origins),
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

    # Added last so it wraps everything else, CORS included
    if settings.request_logging:
        app.add_middleware(RequestLoggingMiddleware)
    else:
        logger.warning("Request logging is DISABLED.")

    return app


app = create_app()
