"""Rule matching: AND over a rule's conditions."""

from .conditions import evaluate_condition
from .models import RequestContext, RoutingRule


def rule_matches(rule: RoutingRule, context: RequestContext) -> bool:
    """Check whether every condition of an enabled rule holds.

    A rule without conditions never matches.

    Args:
        rule: Routing rule snapshot
        context: Request context

    Returns:
        True if the rule applies to this request
    """
    if not rule.enabled:
        return False
    if not rule.conditions:
        return False

    return all(evaluate_condition(condition, context) for condition in rule.conditions)
