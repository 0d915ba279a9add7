"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from iconopt import __version__
from iconopt.engine.registry import PluginSpec, Stage, get_registry
from iconopt.models.responses import HealthResponse, PluginInfo

router = APIRouter()


def _info(spec: PluginSpec) -> PluginInfo:
    return PluginInfo(
        name=spec.name,
        stage=spec.stage.name.lower(),
        tags=sorted(spec.tags),
        description=spec.description,
    )


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        plugins_registered=get_registry().count,
    )


@router.get("/plugins", response_model=list[PluginInfo])
async def plugins(stage: str | None = None) -> list[PluginInfo]:
    """Registered plugins in stage order, optionally for one stage only."""
    registry = get_registry()
    if stage is None:
        return [_info(spec) for spec in registry.all()]
    try:
        selected = Stage[stage.upper()]
    except KeyError:
        raise HTTPException(status_code=422, detail=f"Unknown stage: {stage}") from None
    return [_info(spec) for spec in registry.get_stage(selected)]


@router.get("/plugins/{name}", response_model=PluginInfo)
async def plugin_info(name: str) -> PluginInfo:
    registry = get_registry()
    if name not in registry:
        raise HTTPException(status_code=404, detail=f"Unknown plugin: {name}")
    return _info(registry.get(name))
