"""Logging configuration for the smart-routing engine."""

import logging
import sys
from typing import Optional

from ..config import RoutingConfig


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
    config: Optional[RoutingConfig] = None,
) -> logging.Logger:
    """Setup logging for the ``smart_routing`` logger tree.

    Engine modules log under ``smart_routing.*`` (the engine reports
    evaluation failures there, conditions report unknown operators at
    debug), so one configured parent covers them all.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path
        json_format: Whether to use JSON format
        config: Take level, file and format from this config instead

    Returns:
        Configured logger
    """
    if config is not None:
        level, log_file, json_format = config.log_level, config.log_file, config.log_json

    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("smart_routing")
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    if json_format:
        formatter = logging.Formatter(
            '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
            '"logger": "%(name)s", "message": "%(message)s"}'
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "smart_routing") -> logging.Logger:
    """Get a logger, by default the engine's parent logger."""
    return logging.getLogger(name)
