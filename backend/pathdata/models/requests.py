"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PathParseRequest(BaseModel):
    d: str = Field(..., description="Path data (value of a d attribute)")


class SvgPathsRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")


class SvgNormalizeRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    title: str = Field(default="", description="Optional <title> for the output")
