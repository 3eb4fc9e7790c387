"""Request context building from raw request signals."""

import math
import random
import re
from datetime import datetime
from typing import Mapping, Optional

from .config import DEFAULT_LANGUAGE, RoutingConfig
from .models import (
    DeviceInfo,
    GeoInfo,
    HttpInfo,
    RandomInfo,
    RequestContext,
    TimeInfo,
)
from .common.headers import (
    extract_geo_headers,
    get_referrer,
    normalize_headers,
    parse_accept_language,
)

# SystemRandom reads os.urandom and keeps no state shared between threads
_random = random.SystemRandom()

_MAX_PERCENT = math.nextafter(100.0, 0.0)

_MOBILE_RE = re.compile(r"mobile|android|iphone|ipod|blackberry|iemobile|opera mini", re.IGNORECASE)
_TABLET_RE = re.compile(r"tablet|ipad", re.IGNORECASE)
_IOS_RE = re.compile(r"iphone|ipad|ipod", re.IGNORECASE)


def _detect_type(ua: str) -> str:
    if _MOBILE_RE.search(ua):
        return "mobile"
    if _TABLET_RE.search(ua):
        return "tablet"
    return "desktop"


def _detect_os(ua: str) -> str:
    # Order matters: Android UAs also say "Linux", iOS UAs say "like Mac OS X"
    if "windows nt" in ua:
        return "Windows"
    if "mac os x" in ua:
        return "macOS"
    if "linux" in ua and "android" not in ua:
        return "Linux"
    if "android" in ua:
        return "Android"
    if _IOS_RE.search(ua):
        return "iOS"
    return "Other"


def _detect_browser(ua: str) -> str:
    # Edge and Opera UAs also carry "Chrome" and "Safari" tokens
    if "firefox" in ua:
        return "Firefox"
    if "edg" in ua:
        return "Edge"
    if "opr" in ua or "opera" in ua:
        return "Opera"
    if "chrome" in ua:
        return "Chrome"
    if "safari" in ua:
        return "Safari"
    return "Other"


def detect_device(user_agent: Optional[str]) -> DeviceInfo:
    """Classify a user agent into device type, OS and browser.

    Args:
        user_agent: Raw User-Agent header (may be empty)

    Returns:
        DeviceInfo with type, os and browser
    """
    ua = (user_agent or "").lower()
    return DeviceInfo(
        type=_detect_type(ua),
        os=_detect_os(ua),
        browser=_detect_browser(ua),
    )


def sample_percent() -> float:
    """Draw one uniform sample in [0, 100)."""
    return _random.random() * 100


def build_request_context(
    user_agent: Optional[str],
    headers: Optional[Mapping[str, Optional[str]]] = None,
    query: Optional[Mapping[str, object]] = None,
    now: Optional[datetime] = None,
    random_percent: Optional[float] = None,
    config: Optional[RoutingConfig] = None,
) -> RequestContext:
    """Build the normalized context for one redirect request.

    The random sample is drawn here, once, and every weighted tier of the
    evaluation reuses it.

    Args:
        user_agent: Raw User-Agent header
        headers: Request headers (any casing)
        query: Query-string parameters
        now: Evaluation instant (defaults to local wall-clock time)
        random_percent: Fixed A/B sample instead of a fresh draw
        config: Header names and defaults; built-in defaults if omitted
            (the environment is only read where a RoutingConfig is loaded)

    Returns:
        Immutable RequestContext
    """
    normalized = normalize_headers(headers)

    if config is None:
        geo = extract_geo_headers(normalized)
        default_language = DEFAULT_LANGUAGE
    else:
        geo = extract_geo_headers(
            normalized,
            country_headers=config.geo_country_headers,
            region_header=config.geo_region_header,
            city_header=config.geo_city_header,
        )
        default_language = config.default_language

    now = now or datetime.now()
    time_info = TimeInfo(
        hour=now.hour,
        day=now.isoweekday(),
        month=now.month,
    )

    http = HttpInfo(
        language=parse_accept_language(
            normalized.get("accept-language"),
            default=default_language,
        ),
        referrer=get_referrer(normalized),
        query={str(k): str(v) for k, v in (query or {}).items()},
    )

    if random_percent is None:
        percent = sample_percent()
    else:
        percent = min(max(float(random_percent), 0.0), _MAX_PERCENT)

    return RequestContext(
        device=detect_device(user_agent),
        geo=GeoInfo(**geo),
        time=time_info,
        http=http,
        random=RandomInfo(percent=percent),
    )
