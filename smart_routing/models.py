"""Data models for the smart-routing engine."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple


class ConditionOperator(str, Enum):
    """Operators a rule condition can use."""

    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    CONTAINS = "contains"
    NOT_CONTAINS = "not_contains"
    IN = "in"
    NOT_IN = "not_in"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    BETWEEN = "between"


@dataclass(frozen=True)
class DeviceInfo:
    """Device signals derived from the user agent."""

    type: str = "desktop"
    os: str = "Other"
    browser: str = "Other"


@dataclass(frozen=True)
class GeoInfo:
    """Geolocation signals from edge provider headers."""

    country: Optional[str] = None
    region: Optional[str] = None
    city: Optional[str] = None


@dataclass(frozen=True)
class TimeInfo:
    """Local wall-clock signals (day: 1=Monday .. 7=Sunday)."""

    hour: int
    day: int
    month: int


@dataclass(frozen=True)
class HttpInfo:
    """HTTP-level signals."""

    language: str = "en"
    referrer: Optional[str] = None
    query: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        # Read-only view so a built context cannot be altered through the map
        object.__setattr__(self, "query", MappingProxyType(dict(self.query)))


@dataclass(frozen=True)
class RandomInfo:
    """Per-request random sample used for A/B splits."""

    percent: float = 0.0


@dataclass(frozen=True)
class RequestContext:
    """Normalized request signals that conditions are evaluated against."""

    device: DeviceInfo
    geo: GeoInfo
    time: TimeInfo
    http: HttpInfo
    random: RandomInfo

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "device": {
                "type": self.device.type,
                "os": self.device.os,
                "browser": self.device.browser,
            },
            "geo": {
                "country": self.geo.country,
                "region": self.geo.region,
                "city": self.geo.city,
            },
            "time": {
                "hour": self.time.hour,
                "day": self.time.day,
                "month": self.time.month,
            },
            "http": {
                "language": self.http.language,
                "referrer": self.http.referrer,
                "query": dict(self.http.query),
            },
            "random": {"percent": self.random.percent},
        }


@dataclass(frozen=True)
class RuleCondition:
    """One comparison of a context variable against an expected value.

    ``operator`` is kept as the raw string so that snapshots carrying an
    operator this engine does not know still load; such conditions never match.
    """

    variable: str
    operator: str
    value: str


@dataclass(frozen=True)
class RoutingRule:
    """Immutable snapshot of a routing rule attached to a short link."""

    id: str
    link_id: str
    name: str
    destination_url: str
    priority: int = 0
    weight: Optional[int] = None
    enabled: bool = True
    conditions: Tuple[RuleCondition, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "conditions", tuple(self.conditions))

    @property
    def is_weighted(self) -> bool:
        """Whether this rule is an A/B variant."""
        return self.weight is not None and self.weight > 0


@dataclass(frozen=True)
class EvaluationResult:
    """Routing decision handed back to the redirect handler."""

    matched: bool
    destination_url: Optional[str] = None
    rule_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, omitting destination fields on no match."""
        if not self.matched:
            return {"matched": False}
        return {
            "matched": True,
            "destination_url": self.destination_url,
            "rule_name": self.rule_name,
        }


NO_MATCH = EvaluationResult(matched=False)
