"""POST /api/path/parse: parse one d attribute."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from pathdata.config import Settings
from pathdata.dependencies import get_settings
from pathdata.models.requests import PathParseRequest
from pathdata.models.responses import ErrorDetail, PathParseResponse
from pathdata.models.svg_document import commands_to_models
from pathdata.svg.errors import PathDataError
from pathdata.svg.path import parse_path
from pathdata.svg.serializer import format_path

logger = logging.getLogger(__name__)

router = APIRouter()


def check_length(text: str, settings: Settings) -> None:
    if len(text) > settings.max_path_length:
        raise HTTPException(
            status_code=413,
            detail=f"Input is {len(text)} characters; limit is {settings.max_path_length}",
        )


@router.post("/path/parse", response_model=PathParseResponse)
async def parse(
    req: PathParseRequest,
    settings: Settings = Depends(get_settings),
) -> PathParseResponse:
    check_length(req.d, settings)

    try:
        path = parse_path(req.d)
    except PathDataError as e:
        logger.info("Rejected path data: %s", e)
        raise HTTPException(
            status_code=422,
            detail=ErrorDetail(code=e.code.value, message=e.message).model_dump(),
        ) from e

    return PathParseResponse(
        commands=commands_to_models(path),
        subpaths=[commands_to_models(sp) for sp in path.subpaths()],
        normalized=format_path(path),
    )
