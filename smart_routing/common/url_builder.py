"""Redirect URL building utilities."""

from typing import Dict, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from ..models import EvaluationResult

UTM_KEYS = ("utm_source", "utm_medium", "utm_campaign", "utm_term", "utm_content")


def build_redirect_url(
    default_url: str,
    utm_params: Optional[Dict[str, Optional[str]]] = None,
) -> str:
    """Add the link's UTM parameters to its default destination.

    Existing query parameters are kept; a UTM key already present is
    overwritten. Empty values are skipped.

    Args:
        default_url: The link's stored destination
        utm_params: Mapping of utm_* keys to values

    Returns:
        URL with UTM parameters
    """
    params = {k: v for k, v in (utm_params or {}).items() if k in UTM_KEYS and v}
    if not params:
        return default_url

    parts = urlsplit(default_url)
    query = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k not in params]
    query.extend(params.items())

    return urlunsplit(parts._replace(query=urlencode(query)))


def resolve_destination(
    result: EvaluationResult,
    default_url: str,
    utm_params: Optional[Dict[str, Optional[str]]] = None,
) -> str:
    """Pick the final redirect target for an evaluation result.

    A matched rule's destination is used verbatim; UTM decoration only
    applies to the default destination.

    Args:
        result: Evaluation result from the engine
        default_url: The link's stored destination
        utm_params: The link's UTM parameters

    Returns:
        URL to redirect to
    """
    if result.matched and result.destination_url:
        return result.destination_url
    return build_redirect_url(default_url, utm_params)
