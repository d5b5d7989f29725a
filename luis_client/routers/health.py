"""Health check endpoints."""

from fastapi import APIRouter, Request
from pydantic import BaseModel, ConfigDict
from typing import Optional

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    model_configured: bool
    api_version: Optional[str] = None

    model_config = ConfigDict(protected_namespaces=())


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """Report whether a LUIS model is configured.

    LUIS itself is not called: every query costs a transaction.
    """
    model = request.app.state.luis_service.model
    configured = model.is_configured

    return HealthResponse(
        status="healthy" if configured else "degraded",
        model_configured=configured,
        api_version=str(getattr(model.api_version, "value", model.api_version))
    )
