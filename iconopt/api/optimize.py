"""POST /api/optimize — run the optimizer on one icon."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, HTTPException

from iconopt.config import settings
from iconopt.engine.config import OptimizerConfig
from iconopt.engine.optimizer import optimize
from iconopt.models.requests import OptimizeRequest
from iconopt.models.responses import OptimizeResponse
from iconopt.svg.document import SVGDocument

router = APIRouter()
logger = logging.getLogger(__name__)


def _config_for(req: OptimizeRequest) -> OptimizerConfig:
    cleanup_ids = req.cleanup_ids
    if cleanup_ids is None or cleanup_ids is True:
        cleanup_ids = settings.iconopt_id_prefix
    return OptimizerConfig(
        plugins=req.plugins,
        multipass=settings.iconopt_multipass if req.multipass is None else req.multipass,
        keep_shapes=req.keep_shapes,
        cleanup_ids=cleanup_ids,
    )


@router.post("/optimize", response_model=OptimizeResponse)
async def optimize_svg(req: OptimizeRequest) -> OptimizeResponse:
    start = time.perf_counter()

    try:
        svg = SVGDocument(req.svg)
        ctx = optimize(svg, _config_for(req))
    except ValueError as e:
        logger.info("Rejected optimize request: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    elapsed = (time.perf_counter() - start) * 1000

    return OptimizeResponse(
        svg=svg.to_string(),
        processing_time_ms=round(elapsed, 1),
        plugins_run=len(ctx.completed_plugins),
        plugins_failed=len(ctx.errors),
        errors=ctx.errors,
        stats=ctx.stats,
    )
