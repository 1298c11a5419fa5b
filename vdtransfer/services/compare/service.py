from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from pathlib import Path
from typing import Optional

from vdtransfer.common.logging import get_logger
from vdtransfer.common.settings import get_settings
from vdtransfer.domain.dataclasses.reports import ComparisonReport
from vdtransfer.domain.entities.probe import RawProbeResult
from vdtransfer.domain.entities.video_descriptor import VideoDescriptor
from vdtransfer.domain.errors import ProbeError
from vdtransfer.domain.policies.compatibility import CompatibilityChecker
from vdtransfer.domain.policies.normalizer import MetadataNormalizer
from vdtransfer.domain.ports.probe import VideoProbePort

logger = get_logger(__name__)


class CompareService:
    """
    High-level orchestrator: probe -> normalize -> check.

    The domain policies are pure; this is where I/O, threading and logging
    live. Probing is I/O-bound, so reference and target are probed side by side.
    """

    def __init__(self, probe: Optional[VideoProbePort] = None, *, max_workers: Optional[int] = None):
        self.probe = probe
        self.max_workers = max_workers or get_settings().concurrency.ffprobe_workers
        self.normalizer = MetadataNormalizer()
        self.checker = CompatibilityChecker()

    def describe(self, path: Path | str) -> VideoDescriptor:
        raw = self._require_probe().probe(Path(path))
        return self.normalizer.normalize(str(path), raw)

    def compare(self, reference_path: Path | str, target_path: Path | str) -> ComparisonReport:
        started = datetime.now()
        probe = self._require_probe()
        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="ffprobe") as pool:
            ref_fut = pool.submit(probe.probe, Path(reference_path))
            tgt_fut = pool.submit(probe.probe, Path(target_path))
            ref_raw, tgt_raw = ref_fut.result(), tgt_fut.result()

        report = self.compare_raw(str(reference_path), ref_raw, str(target_path), tgt_raw)
        report.started_at = started
        return report

    def compare_raw(
        self,
        reference_path: str,
        reference_raw: RawProbeResult,
        target_path: str,
        target_raw: RawProbeResult,
    ) -> ComparisonReport:
        """Same as compare() for callers that already hold probe output."""
        started = datetime.now()
        reference = self.normalizer.normalize(reference_path, reference_raw)
        target = self.normalizer.normalize(target_path, target_raw)
        warnings = self.checker.check(reference, target)

        logger.info(
            "compared %s (%dx%d) vs %s (%dx%d): %d warning(s)",
            reference.path, reference.stored_width, reference.stored_height,
            target.path, target.stored_width, target.stored_height,
            len(warnings),
        )
        for w in warnings:
            logger.warning("%s", w)

        return ComparisonReport(
            reference=reference,
            target=target,
            warnings=warnings,
            started_at=started,
            finished_at=datetime.now(),
        )

    def _require_probe(self) -> VideoProbePort:
        if self.probe is None:
            raise ProbeError("CompareService was built without a probe; use compare_raw().")
        return self.probe
