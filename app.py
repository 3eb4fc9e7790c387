#!/usr/bin/env python3
"""
Main entry point for the routing preview service.

The engine itself is synchronous and holds no shared state, so the async
handlers call it directly. Set PORT / HOST / LOG_LEVEL in the environment.

Usage:
    python app.py

Environment variables:
    HOST - Host to bind to
    PORT - Port to listen on
    LOG_LEVEL - Logging level
    WEIGHTED_SUPPRESSES_PLAIN - Keep plain matches out of A/B tiers (default true)
"""

import signal
import sys

import uvicorn

from smart_routing.config import load_config
from smart_routing.common.logging_config import setup_logging
from web_app import create_app


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(config=config)

    logger.info("Smart Routing Preview Service")
    logger.info(f"Configuration: {config.log_summary()}")

    app = create_app(config=config, logger=logger)

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
