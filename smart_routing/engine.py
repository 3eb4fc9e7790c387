"""Routing decision engine: priority tiers and A/B resolution."""

import logging
from itertools import groupby
from typing import Iterable, List, Optional, Sequence, Tuple

from .matcher import rule_matches
from .models import NO_MATCH, EvaluationResult, RequestContext, RoutingRule
from .selector import select_weighted

# A tier with matching weighted rules never falls back to its plain matches,
# even when the weighted draw selects nothing.
WEIGHTED_TIER_SUPPRESSES_PLAIN = True

Tier = Tuple[int, List[RoutingRule]]


def group_by_priority(rules: Iterable[RoutingRule]) -> List[Tier]:
    """Sort rules by priority and group them into ascending tiers.

    The sort is stable, so rules sharing a priority keep their declared order.

    Args:
        rules: Rule snapshots in declared order

    Returns:
        Ordered list of (priority, rules) tuples
    """
    ordered = sorted(rules, key=lambda r: r.priority)
    return [(priority, list(group)) for priority, group in groupby(ordered, key=lambda r: r.priority)]


def _matched(rule: RoutingRule) -> EvaluationResult:
    return EvaluationResult(
        matched=True,
        destination_url=rule.destination_url,
        rule_name=rule.name,
    )


class RoutingEngine:
    """Decides which destination a redirect request goes to."""

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        weighted_suppresses_plain: bool = WEIGHTED_TIER_SUPPRESSES_PLAIN,
    ):
        """Initialize routing engine.

        Args:
            logger: Optional logger
            weighted_suppresses_plain: Keep a tier's plain matches out of play
                whenever the tier has matching weighted rules
        """
        self.logger = logger or logging.getLogger(__name__)
        self.weighted_suppresses_plain = weighted_suppresses_plain

    def evaluate(self, rules: Sequence[RoutingRule], context: RequestContext) -> EvaluationResult:
        """Evaluate a link's rules against one request.

        Tiers are walked in ascending priority and the first tier that
        yields a rule decides. Within a tier, matching weighted rules are
        resolved by the A/B selector; otherwise the first plain match in
        declared order wins.

        Args:
            rules: Enabled rules of one short link, with their conditions
            context: Request context (its random sample drives A/B picks)

        Returns:
            EvaluationResult; ``matched`` is False when no rule applies
        """
        if not rules:
            return NO_MATCH

        try:
            return self._evaluate_tiers(rules, context)
        except Exception as e:
            self.logger.error(f"Routing evaluation error: {e}", exc_info=True)
            return NO_MATCH

    def _evaluate_tiers(self, rules: Sequence[RoutingRule], context: RequestContext) -> EvaluationResult:
        for priority, tier in group_by_priority(rules):
            matching = [rule for rule in tier if rule_matches(rule, context)]
            if not matching:
                continue

            weighted = [rule for rule in matching if rule.is_weighted]
            plain = [rule for rule in matching if not rule.is_weighted]

            if weighted:
                selected = select_weighted(weighted, context.random.percent)
                if selected is not None:
                    self.logger.debug(
                        f"Tier {priority}: A/B selected '{selected.name}' "
                        f"(percent={context.random.percent:.2f}, variants={len(weighted)})"
                    )
                    return _matched(selected)

                self.logger.debug(f"Tier {priority}: A/B draw selected no variant")
                if self.weighted_suppresses_plain:
                    continue

            if plain:
                self.logger.debug(f"Tier {priority}: matched '{plain[0].name}'")
                return _matched(plain[0])

        return NO_MATCH


_default_engine = RoutingEngine()


def evaluate_routing_rules(rules: Sequence[RoutingRule], context: RequestContext) -> EvaluationResult:
    """Evaluate rules with the default engine settings.

    Args:
        rules: Enabled rules of one short link
        context: Request context

    Returns:
        EvaluationResult
    """
    return _default_engine.evaluate(rules, context)
