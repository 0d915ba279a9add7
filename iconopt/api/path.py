"""POST /api/path/normalize — closepath normalization for a single ``d`` value."""

from __future__ import annotations

from fastapi import APIRouter

from iconopt.engine.plugins.fix_z import fix_path_data
from iconopt.models.requests import NormalizePathRequest
from iconopt.models.responses import NormalizePathResponse
from iconopt.path.parser import parse_path_data

router = APIRouter(prefix="/path")


@router.post("/normalize", response_model=NormalizePathResponse)
async def normalize(req: NormalizePathRequest) -> NormalizePathResponse:
    d, closed = fix_path_data(req.d, disable_space_after_flags=req.disable_space_after_flags)
    return NormalizePathResponse(
        d=d,
        commands=len(parse_path_data(d)),
        closed=closed,
    )
