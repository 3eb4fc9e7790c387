"""Header parsing utilities for request context building."""

from typing import Dict, Iterable, Mapping, Optional
from urllib.parse import unquote

from ..config import (
    DEFAULT_GEO_CITY_HEADER,
    DEFAULT_GEO_COUNTRY_HEADERS,
    DEFAULT_GEO_REGION_HEADER,
    DEFAULT_LANGUAGE,
)


def normalize_headers(headers: Optional[Mapping[str, Optional[str]]]) -> Dict[str, str]:
    """Lower-case header names and drop empty values.

    Args:
        headers: Request headers mapping (any casing)

    Returns:
        Dictionary keyed by lower-case header name
    """
    if not headers:
        return {}
    return {k.lower(): v for k, v in headers.items() if v}


def first_header(headers: Dict[str, str], names: Iterable[str]) -> Optional[str]:
    """Return the first non-blank value among the given header names.

    Args:
        headers: Normalized (lower-case) headers
        names: Candidate header names, checked in order

    Returns:
        Header value or None
    """
    for name in names:
        value = headers.get(name.lower())
        if value and value.strip():
            return value.strip()
    return None


def extract_geo_headers(
    headers: Dict[str, str],
    country_headers: Iterable[str] = DEFAULT_GEO_COUNTRY_HEADERS,
    region_header: str = DEFAULT_GEO_REGION_HEADER,
    city_header: str = DEFAULT_GEO_CITY_HEADER,
) -> Dict[str, Optional[str]]:
    """Extract geolocation set by the edge provider.

    Vercel percent-encodes the city name, so it is decoded here.

    Args:
        headers: Normalized (lower-case) headers
        country_headers: Country headers, checked in order
        region_header: Region header name
        city_header: City header name

    Returns:
        Dictionary with country, region, city (None when absent)
    """
    city = first_header(headers, [city_header])
    return {
        "country": first_header(headers, country_headers),
        "region": first_header(headers, [region_header]),
        "city": unquote(city) if city else None,
    }


def parse_accept_language(value: Optional[str], default: str = DEFAULT_LANGUAGE) -> str:
    """Get the primary language subtag of an Accept-Language header.

    ``es-ES,es;q=0.9,en;q=0.8`` gives ``es``.
    """
    if not value:
        return default
    first = value.split(",")[0].split(";")[0].strip()
    language = first.split("-")[0].strip().lower()
    return language or default


def get_referrer(headers: Dict[str, str]) -> Optional[str]:
    """Get the referrer, accepting both the standard and the correct spelling."""
    return first_header(headers, ["referer", "referrer"])
