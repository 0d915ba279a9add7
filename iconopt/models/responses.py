"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    plugins_registered: int = 0


class OptimizeResponse(BaseModel):
    svg: str
    processing_time_ms: float = 0.0
    plugins_run: int = 0
    plugins_failed: int = 0
    errors: dict[str, str] = Field(default_factory=dict)
    stats: dict[str, int] = Field(default_factory=dict)


class NormalizePathResponse(BaseModel):
    d: str
    commands: int = 0
    closed: int = 0


class PluginInfo(BaseModel):
    name: str
    stage: str
    tags: list[str] = Field(default_factory=list)
    description: str = ""
