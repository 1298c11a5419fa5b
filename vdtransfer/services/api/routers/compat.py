# vdtransfer/services/api/routers/compat.py
from __future__ import annotations
from fastapi import APIRouter, Depends

from vdtransfer.common.probe.ffprobe_helpers import parse_ffprobe
from vdtransfer.common.settings import get_settings
from vdtransfer.services.api.deps import get_compare_service, get_raw_compare_service
from vdtransfer.services.compare.service import CompareService
from vdtransfer.services.mappers.compat import to_compat_response
from vdtransfer.services.schemas.compat import CompatProbeRequest, CompatRequest, CompatResponse

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/compat", tags=["compat"])


@router.post("", response_model=CompatResponse)
def compare_probed(
    payload: CompatRequest,
    svc: CompareService = Depends(get_raw_compare_service),
) -> CompatResponse:
    """Compare two files from ffprobe JSON the caller already has."""
    report = svc.compare_raw(
        payload.reference.path,
        parse_ffprobe(payload.reference.probe),
        payload.target.path,
        parse_ffprobe(payload.target.probe),
    )
    return to_compat_response(report)


@router.post("/probe", response_model=CompatResponse)
def compare_paths(
    payload: CompatProbeRequest,
    svc: CompareService = Depends(get_compare_service),
) -> CompatResponse:
    """Probe both files server-side, then compare."""
    report = svc.compare(payload.reference_path, payload.target_path)
    return to_compat_response(report)
