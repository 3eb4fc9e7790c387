"""Smart-routing decision engine for short links."""

from .models import (
    ConditionOperator,
    DeviceInfo,
    GeoInfo,
    TimeInfo,
    HttpInfo,
    RandomInfo,
    RequestContext,
    RuleCondition,
    RoutingRule,
    EvaluationResult,
)
from .context import build_request_context, detect_device
from .conditions import evaluate_condition, resolve_variable
from .matcher import rule_matches
from .selector import select_weighted, build_segments
from .engine import (
    RoutingEngine,
    evaluate_routing_rules,
    group_by_priority,
    WEIGHTED_TIER_SUPPRESSES_PLAIN,
)
from .schemas import RoutingRuleSchema, RuleConditionSchema, RuleValidationError, parse_rules

__all__ = [
    "ConditionOperator",
    "DeviceInfo",
    "GeoInfo",
    "TimeInfo",
    "HttpInfo",
    "RandomInfo",
    "RequestContext",
    "RuleCondition",
    "RoutingRule",
    "EvaluationResult",
    "build_request_context",
    "detect_device",
    "evaluate_condition",
    "resolve_variable",
    "rule_matches",
    "select_weighted",
    "build_segments",
    "RoutingEngine",
    "evaluate_routing_rules",
    "group_by_priority",
    "WEIGHTED_TIER_SUPPRESSES_PLAIN",
    "RoutingRuleSchema",
    "RuleConditionSchema",
    "RuleValidationError",
    "parse_rules",
]
