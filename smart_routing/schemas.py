"""Pydantic schemas for routing rule payloads.

Rules arriving as JSON (the preview API, the CLI, fixtures) are validated
here and converted into the engine's immutable models.
"""

from typing import Any, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from .common.validators import is_valid_url, is_valid_variable, normalize_url
from .models import ConditionOperator, RoutingRule, RuleCondition


class RuleValidationError(ValueError):
    """A routing rule payload failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None):
        super().__init__(message)
        self.errors = errors or []


class RuleConditionSchema(BaseModel):
    """One condition of a routing rule."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    id: Optional[str] = None
    variable: str = Field(..., min_length=1, description="Dotted context path, e.g. geo.country")
    operator: ConditionOperator = Field(..., description="Comparison operator")
    value: str = Field(..., min_length=1, description="Expected value")

    @field_validator("variable")
    @classmethod
    def validate_variable(cls, v: str) -> str:
        """Validate variable shape."""
        is_valid, error = is_valid_variable(v)
        if not is_valid:
            raise ValueError(error)
        return v

    def to_condition(self) -> RuleCondition:
        """Convert to engine model."""
        return RuleCondition(
            variable=self.variable,
            operator=self.operator.value,
            value=self.value,
        )


class RoutingRuleSchema(BaseModel):
    """A routing rule with its conditions."""

    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
        json_schema_extra={
            "examples": [
                {
                    "id": "rule-windows",
                    "linkId": "link-123",
                    "name": "Windows Users",
                    "destinationUrl": "https://example.com/windows",
                    "priority": 0,
                    "enabled": True,
                    "conditions": [
                        {"variable": "device.os", "operator": "equals", "value": "Windows"}
                    ],
                }
            ]
        },
    )

    id: str = Field(default="", description="Rule identifier")
    link_id: str = Field(default="", description="Owning short link")
    name: str = Field(..., min_length=1, max_length=200, description="Rule name")
    destination_url: str = Field(..., min_length=1, description="Where matching visitors go")
    priority: int = Field(default=0, ge=0, description="Lower value wins")
    weight: Optional[int] = Field(default=None, ge=1, le=100, description="A/B weight")
    enabled: bool = Field(default=True)
    conditions: List[RuleConditionSchema] = Field(..., min_length=1)

    @field_validator("destination_url")
    @classmethod
    def validate_destination_url(cls, v: str) -> str:
        """Normalize and validate the destination URL."""
        url = normalize_url(v)
        is_valid, error = is_valid_url(url)
        if not is_valid:
            raise ValueError(f"Please enter a valid destination URL: {error}")
        return url

    def to_rule(self) -> RoutingRule:
        """Convert to engine model."""
        return RoutingRule(
            id=self.id,
            link_id=self.link_id,
            name=self.name,
            destination_url=self.destination_url,
            priority=self.priority,
            weight=self.weight,
            enabled=self.enabled,
            conditions=tuple(c.to_condition() for c in self.conditions),
        )


def parse_rule(data: Any) -> RoutingRule:
    """Validate one rule payload.

    Raises:
        RuleValidationError: If the payload is invalid
    """
    try:
        return RoutingRuleSchema.model_validate(data).to_rule()
    except ValidationError as e:
        raise RuleValidationError(f"Invalid routing rule: {e.error_count()} error(s)", e.errors()) from e


def parse_rules(payload: Iterable[Any]) -> List[RoutingRule]:
    """Validate a list of rule payloads, keeping their order.

    Raises:
        RuleValidationError: If the payload is not a list, or on the first
            invalid rule
    """
    if not isinstance(payload, (list, tuple)):
        raise RuleValidationError(
            f"Expected a list of rules, got {type(payload).__name__}"
        )

    rules = []
    for index, data in enumerate(payload):
        try:
            rules.append(parse_rule(data))
        except RuleValidationError as e:
            raise RuleValidationError(f"Rule #{index}: {e}", e.errors) from e
    return rules
