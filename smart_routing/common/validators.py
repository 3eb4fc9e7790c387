"""Validation utilities for routing rules."""

import re
from urllib.parse import urlparse
from typing import Tuple

_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z\d+\-.]*://")
# Left as typed so is_valid_url refuses them; prefixing would turn
# "mailto:a@b.com" into a valid https URL with "mailto:a" as userinfo
_SPECIAL_SCHEME_RE = re.compile(r"^(mailto|tel):")


def normalize_url(url: str) -> str:
    """Add ``https://`` to a URL typed without a protocol.

    Args:
        url: The URL as entered by the rule author

    Returns:
        Normalized URL (unchanged if it already carries a scheme)
    """
    if not url:
        return url

    trimmed = url.strip()
    if _SCHEME_RE.match(trimmed) or _SPECIAL_SCHEME_RE.match(trimmed):
        return trimmed

    return f"https://{trimmed}"


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate a destination URL.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "URL is required"

    if len(url) > 2048:
        return False, "URL is too long (max 2048 characters)"

    if any(ch.isspace() for ch in url):
        return False, "URL must not contain whitespace"

    try:
        result = urlparse(url)
    except ValueError as e:
        return False, f"Invalid URL format: {str(e)}"

    if result.scheme not in ["http", "https"]:
        return False, "URL must use http or https protocol"

    # A bare word like "https://not" has no dot in its host
    if not result.hostname or ("." not in result.hostname and result.hostname != "localhost"):
        return False, "URL must have a valid domain"

    return True, ""


def is_valid_variable(variable: str) -> Tuple[bool, str]:
    """Check that a condition variable has the ``category.field`` shape.

    Args:
        variable: Dotted variable path

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not variable or not isinstance(variable, str):
        return False, "Variable is required"

    category, sep, field = variable.partition(".")
    if not sep or not category or not field:
        return False, "Variable must look like 'category.field'"

    return True, ""
