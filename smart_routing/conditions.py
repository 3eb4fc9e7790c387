"""Evaluation of single rule conditions against a request context.

Every failure mode here is closed: an unknown variable, an unknown operator
or an operand that does not parse as a number makes the condition false.
Nothing in this module raises for string inputs.
"""

import logging
import math
from typing import Callable, Dict, Optional, Union

from .models import ConditionOperator, RequestContext, RuleCondition

logger = logging.getLogger(__name__)

Value = Union[str, int, float]

_NAN = float("nan")

_FIELDS = {
    "device": ("type", "os", "browser"),
    "geo": ("country", "region", "city"),
    "time": ("hour", "day", "month"),
    "http": ("language", "referrer"),
    "random": ("percent",),
}

_QUERY_PREFIX = "query."


def resolve_variable(context: RequestContext, variable: str) -> Optional[Value]:
    """Look up a dotted variable such as ``geo.country`` in the context.

    ``http.query.<key>`` reads a query-string parameter.

    Args:
        context: Request context
        variable: Dotted variable path

    Returns:
        The value, or None when the path is unsupported or the value is absent
    """
    if not isinstance(variable, str):
        return None

    category, _, field = variable.partition(".")

    if category == "http" and field.startswith(_QUERY_PREFIX):
        key = field[len(_QUERY_PREFIX):]
        return context.http.query.get(key) if key else None

    if field not in _FIELDS.get(category, ()):
        return None

    return getattr(getattr(context, category), field)


def to_number(value: object) -> float:
    """Parse a value as a float, giving NaN when it does not parse."""
    if isinstance(value, bool):
        return _NAN
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value).strip())
    except ValueError:
        return _NAN


def _split_list(expected: str):
    return {token.strip() for token in expected.split(",")}


def _between(actual: Value, expected: str) -> bool:
    bounds = expected.split("-")
    if len(bounds) < 2:
        return False
    low, high = to_number(bounds[0]), to_number(bounds[1])
    num = to_number(actual)
    # NaN fails both comparisons
    return low <= num <= high


_STRING_OPS: Dict[str, Callable[[str, str], bool]] = {
    ConditionOperator.EQUALS.value: lambda a, e: a == e,
    ConditionOperator.NOT_EQUALS.value: lambda a, e: a != e,
    ConditionOperator.CONTAINS.value: lambda a, e: e in a,
    ConditionOperator.NOT_CONTAINS.value: lambda a, e: e not in a,
    ConditionOperator.IN.value: lambda a, e: a in _split_list(e),
    ConditionOperator.NOT_IN.value: lambda a, e: a not in _split_list(e),
}

_NUMERIC_OPS: Dict[str, Callable[[float, float], bool]] = {
    ConditionOperator.GT.value: lambda a, e: a > e,
    ConditionOperator.GTE.value: lambda a, e: a >= e,
    ConditionOperator.LT.value: lambda a, e: a < e,
    ConditionOperator.LTE.value: lambda a, e: a <= e,
}


def _format(value: Value) -> str:
    # 8.0 should compare as "8", the way the value was authored
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def evaluate_condition(condition: RuleCondition, context: RequestContext) -> bool:
    """Evaluate one condition against the request context.

    Args:
        condition: Condition to evaluate
        context: Request context

    Returns:
        True if the condition holds
    """
    actual = resolve_variable(context, condition.variable)
    if actual is None:
        return False

    operator = condition.operator
    if isinstance(operator, ConditionOperator):
        operator = operator.value

    expected = condition.value if isinstance(condition.value, str) else str(condition.value)

    string_op = _STRING_OPS.get(operator)
    if string_op is not None:
        return string_op(_format(actual).lower(), expected.lower())

    numeric_op = _NUMERIC_OPS.get(operator)
    if numeric_op is not None:
        a, e = to_number(actual), to_number(expected)
        if math.isnan(a) or math.isnan(e):
            return False
        return numeric_op(a, e)

    if operator == ConditionOperator.BETWEEN.value:
        return _between(actual, expected)

    logger.debug("Unknown condition operator %r on %s", operator, condition.variable)
    return False
