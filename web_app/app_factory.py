"""FastAPI application factory."""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from smart_routing.config import RoutingConfig
from smart_routing.engine import RoutingEngine

from .api import api_router
from .middleware.logging import LoggingMiddleware


def create_app(
    config: Optional[RoutingConfig] = None,
    engine: Optional[RoutingEngine] = None,
    logger: Optional[logging.Logger] = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        config: Configuration instance (loaded from environment if omitted)
        engine: Routing engine (built from config if omitted)
        logger: Optional logger

    Returns:
        Configured FastAPI app
    """
    config = config or RoutingConfig()
    logger = logger or logging.getLogger("smart_routing")

    app = FastAPI(
        title="Smart Routing Preview",
        description="Dry-run evaluation of short-link routing rules",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.state.config = config
    app.state.logger = logger
    app.state.engine = engine or RoutingEngine(
        logger=logger,
        weighted_suppresses_plain=config.weighted_suppresses_plain,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware, logger=logging.getLogger("smart_routing.web"))

    app.include_router(api_router, prefix="/api", tags=["API"])

    return app
