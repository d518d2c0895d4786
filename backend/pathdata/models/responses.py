"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from pathdata.models.svg_document import CommandModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    commands_supported: int = 0


class PathParseResponse(BaseModel):
    commands: list[CommandModel] = Field(default_factory=list)
    subpaths: list[list[CommandModel]] = Field(default_factory=list)
    # Same path written back out with every command explicit
    normalized: str = ""


class ErrorDetail(BaseModel):
    code: str
    message: str


class NormalizeResponse(BaseModel):
    # Every parsed path rewritten with explicit commands
    svg: str
    path_count: int = 0
    errors: dict[str, str] = Field(default_factory=dict)
