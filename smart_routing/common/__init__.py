"""Common utilities for the smart-routing engine."""

from .validators import is_valid_url, is_valid_variable, normalize_url
from .headers import (
    normalize_headers,
    first_header,
    extract_geo_headers,
    parse_accept_language,
    get_referrer,
)
from .url_builder import build_redirect_url, resolve_destination
from .logging_config import setup_logging, get_logger

__all__ = [
    "is_valid_url",
    "is_valid_variable",
    "normalize_url",
    "normalize_headers",
    "first_header",
    "extract_geo_headers",
    "parse_accept_language",
    "get_referrer",
    "build_redirect_url",
    "resolve_destination",
    "setup_logging",
    "get_logger",
]
