"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from pathdata import __version__
from pathdata.models.responses import HealthResponse
from pathdata.svg.symbols import COMMAND_ARITY

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        commands_supported=len(COMMAND_ARITY),
    )


@router.get("/commands")
async def commands() -> dict[str, int]:
    """Operator symbol -> parameter count."""
    return dict(COMMAND_ARITY)
