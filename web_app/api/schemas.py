"""Pydantic schemas for API requests and responses."""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from smart_routing.schemas import RoutingRuleSchema


class EvaluateRequest(BaseModel):
    """Rules plus a simulated request to evaluate them against."""

    rules: List[RoutingRuleSchema] = Field(default_factory=list, description="Rules of one short link")
    user_agent: Optional[str] = Field(None, description="User agent (defaults to the caller's)")
    headers: Optional[Dict[str, str]] = Field(None, description="Request headers (defaults to the caller's)")
    query: Dict[str, str] = Field(default_factory=dict, description="Query-string parameters")
    random_percent: Optional[float] = Field(None, ge=0, lt=100, description="Fixed A/B sample")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "rules": [
                        {
                            "name": "Windows Users",
                            "destinationUrl": "https://example.com/windows",
                            "priority": 0,
                            "conditions": [
                                {"variable": "device.os", "operator": "equals", "value": "Windows"}
                            ],
                        }
                    ],
                    "user_agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64)",
                    "random_percent": 42.0,
                }
            ]
        }
    }


class EvaluateResponse(BaseModel):
    """Routing decision and the context it was made on."""

    matched: bool = Field(..., description="Whether a rule applied")
    destination_url: Optional[str] = Field(None, description="Destination of the selected rule")
    rule_name: Optional[str] = Field(None, description="Name of the selected rule")
    context: Dict = Field(..., description="Request context used for evaluation")


class AliasResponse(BaseModel):
    """A condition alias."""

    name: str
    category: str
    variable: str
    operator: str
    value: str
    icon: Optional[str] = None
    is_system: bool = True


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(BaseModel):
    """Error response."""

    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Detailed error information")
