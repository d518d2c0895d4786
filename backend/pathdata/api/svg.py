"""POST /api/svg/paths, /api/svg/normalize: whole-document endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from pathdata.api.path import check_length
from pathdata.config import Settings
from pathdata.dependencies import get_settings
from pathdata.models.requests import SvgNormalizeRequest, SvgPathsRequest
from pathdata.models.responses import NormalizeResponse
from pathdata.models.svg_document import SvgDocument
from pathdata.svg.element import ElementDecodeError
from pathdata.svg.parser import parse_svg
from pathdata.svg.serializer import serialize_svg

router = APIRouter()


def _parse_document(svg: str) -> SvgDocument:
    try:
        return parse_svg(svg)
    except ElementDecodeError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


@router.post("/svg/paths", response_model=SvgDocument)
async def svg_paths(
    req: SvgPathsRequest,
    settings: Settings = Depends(get_settings),
) -> SvgDocument:
    check_length(req.svg, settings)
    return _parse_document(req.svg)


@router.post("/svg/normalize", response_model=NormalizeResponse)
async def svg_normalize(
    req: SvgNormalizeRequest,
    settings: Settings = Depends(get_settings),
) -> NormalizeResponse:
    """Rewrite every valid <path> with canonical path data; bad paths are dropped."""
    check_length(req.svg, settings)
    doc = _parse_document(req.svg)

    canvas_w, canvas_h = (24.0, 24.0) if doc.viewbox is None else doc.viewbox[2:]
    svg = serialize_svg(
        [p.to_path() for p in doc.paths],
        canvas_w=canvas_w,
        canvas_h=canvas_h,
        title=req.title,
    )
    return NormalizeResponse(svg=svg, path_count=len(doc.paths), errors=doc.errors)
