"""Weighted (A/B) selection among the matching variants of one tier."""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .models import RoutingRule


@dataclass(frozen=True)
class WeightSegment:
    """Half-open interval ``[start, end)`` owned by one variant."""

    rule: RoutingRule
    start: int
    end: int

    def contains(self, point: float) -> bool:
        return self.start <= point < self.end


def build_segments(rules: Sequence[RoutingRule]) -> List[WeightSegment]:
    """Lay the variants' weights end to end, in the given order.

    Args:
        rules: Weighted rules, already in tier order

    Returns:
        One segment per rule
    """
    segments = []
    cumulative = 0
    for rule in rules:
        weight = rule.weight or 0
        segments.append(WeightSegment(rule=rule, start=cumulative, end=cumulative + weight))
        cumulative += weight
    return segments


def select_weighted(rules: Sequence[RoutingRule], random_percent: float) -> Optional[RoutingRule]:
    """Pick a variant using the request's random sample.

    The sample is scaled onto the sum of weights, which is not normalized to
    100. A sample that lands in no segment (zero total, or the upper edge)
    selects nothing.

    Args:
        rules: Matching weighted rules of one tier, in tier order
        random_percent: The context's sample in [0, 100)

    Returns:
        The selected rule, or None
    """
    segments = build_segments(rules)
    if not segments:
        return None

    total = segments[-1].end
    scaled = (random_percent / 100) * total

    for segment in segments:
        if segment.contains(scaled):
            return segment.rule

    return None
