"""Pytest configuration and fixtures."""

import pytest

from smart_routing.common.logging_config import setup_logging
from smart_routing.config import RoutingConfig
from smart_routing.engine import RoutingEngine
from smart_routing.models import (
    DeviceInfo,
    GeoInfo,
    HttpInfo,
    RandomInfo,
    RequestContext,
    RoutingRule,
    RuleCondition,
    TimeInfo,
)


USER_AGENTS = {
    "iphone_safari": (
        "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) AppleWebKit/605.1.15 "
        "(KHTML, like Gecko) Version/17.0 Mobile/15E148 Safari/604.1"
    ),
    "android_chrome": (
        "Mozilla/5.0 (Linux; Android 14; Pixel 8) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Mobile Safari/537.36"
    ),
    "ipad_safari": (
        "Mozilla/5.0 (iPad; CPU OS 17_0 like Mac OS X) AppleWebKit/605.1.15 "
        "(KHTML, like Gecko) Version/17.0 Safari/604.1"
    ),
    "windows_edge": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36 Edg/120.0.0.0"
    ),
    "windows_chrome": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "mac_firefox": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 14.1; rv:121.0) Gecko/20100101 Firefox/121.0"
    ),
    "mac_safari": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_1) AppleWebKit/605.1.15 "
        "(KHTML, like Gecko) Version/17.1 Safari/605.1.15"
    ),
    "linux_opera": (
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36 OPR/106.0.0.0"
    ),
}


def make_context(
    device_type="desktop",
    os="Windows",
    browser="Chrome",
    country=None,
    region=None,
    city=None,
    hour=12,
    day=3,
    month=6,
    language="en",
    referrer=None,
    query=None,
    percent=50.0,
) -> RequestContext:
    """Build a RequestContext directly, bypassing header parsing."""
    return RequestContext(
        device=DeviceInfo(type=device_type, os=os, browser=browser),
        geo=GeoInfo(country=country, region=region, city=city),
        time=TimeInfo(hour=hour, day=day, month=month),
        http=HttpInfo(language=language, referrer=referrer, query=query or {}),
        random=RandomInfo(percent=percent),
    )


def make_rule(
    name="rule",
    destination_url="https://example.com",
    priority=0,
    weight=None,
    enabled=True,
    conditions=None,
    rule_id=None,
) -> RoutingRule:
    """Build a RoutingRule; conditions default to one that always holds on desktop."""
    if conditions is None:
        conditions = [RuleCondition("device.type", "equals", "desktop")]
    return RoutingRule(
        id=rule_id or f"id-{name}",
        link_id="link-1",
        name=name,
        destination_url=destination_url,
        priority=priority,
        weight=weight,
        enabled=enabled,
        conditions=tuple(conditions),
    )


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def config():
    """Configuration with defaults, independent of the environment."""
    return RoutingConfig(_env_file=None)


@pytest.fixture
def engine(logger):
    """Create engine with default settings."""
    return RoutingEngine(logger=logger)


@pytest.fixture
def user_agents():
    """Representative user agents."""
    return USER_AGENTS
