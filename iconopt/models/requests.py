"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class OptimizeRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    multipass: bool | None = Field(
        default=None,
        description="Repeat plugins while output shrinks (defaults to server setting)",
    )
    keep_shapes: bool = Field(default=False, description="Skip plugins that change shapes")
    cleanup_ids: str | bool | None = Field(
        default=None,
        description="Id prefix, or false to keep ids (defaults to server setting)",
    )
    plugins: list[str] | None = Field(
        default=None,
        description="Custom plugin list; disables id replacement",
    )


class NormalizePathRequest(BaseModel):
    d: str = Field(..., description="Path data (d attribute)")
    disable_space_after_flags: bool = Field(default=False, description="Pack arc flags")
