# vdtransfer/services/mappers/compat.py
from __future__ import annotations

from vdtransfer.domain.dataclasses.reports import ComparisonReport
from vdtransfer.services.mappers.descriptor import to_schema
from vdtransfer.services.schemas.compat import CompatResponse


def to_compat_response(report: ComparisonReport) -> CompatResponse:
    return CompatResponse(
        ok=report.ok,
        warnings=list(report.warnings),
        reference=to_schema(report.reference),
        target=to_schema(report.target),
    )
