"""API routes implementation."""

from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Request, status

from smart_routing.aliases import AliasCategory, list_aliases
from smart_routing.common.headers import normalize_headers
from smart_routing.context import build_request_context

from .schemas import (
    AliasResponse,
    ErrorResponse,
    EvaluateRequest,
    EvaluateResponse,
    HealthResponse,
)

router = APIRouter()


@router.post(
    "/evaluate",
    response_model=EvaluateResponse,
    responses={
        422: {"description": "Invalid rule payload"},
    },
    summary="Preview routing decision",
    description=(
        "Evaluate a link's routing rules against a simulated request. "
        "User agent and headers default to those of the calling request."
    ),
)
async def evaluate_rules(request: Request, body: EvaluateRequest):
    """Evaluate routing rules without redirecting."""
    config = request.app.state.config
    engine = request.app.state.engine

    headers = body.headers if body.headers is not None else dict(request.headers)
    user_agent = body.user_agent
    if user_agent is None:
        user_agent = normalize_headers(headers).get("user-agent", "")

    context = build_request_context(
        user_agent=user_agent,
        headers=headers,
        query=body.query,
        random_percent=body.random_percent,
        config=config,
    )

    rules = [rule.to_rule() for rule in body.rules]
    result = engine.evaluate(rules, context)

    return EvaluateResponse(
        matched=result.matched,
        destination_url=result.destination_url,
        rule_name=result.rule_name,
        context=context.to_dict(),
    )


@router.get(
    "/aliases",
    response_model=List[AliasResponse],
    responses={
        400: {"model": ErrorResponse, "description": "Unknown category"},
    },
    summary="List condition aliases",
    description="List the built-in condition aliases, optionally for one category.",
)
async def get_aliases(category: Optional[str] = None):
    """List system condition aliases."""
    if category is not None and category.lower() not in {c.value for c in AliasCategory}:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown alias category '{category}'",
        )

    return [AliasResponse(**alias.to_dict()) for alias in list_aliases(category)]


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
)
async def health_check():
    """Check service health."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
    )
