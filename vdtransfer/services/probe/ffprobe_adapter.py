# vdtransfer/services/probe/ffprobe_adapter.py
from __future__ import annotations

import shutil
from pathlib import Path
from typing import Optional

from vdtransfer.common.logging import get_logger
from vdtransfer.common.probe.ffprobe_helpers import build_ffprobe_cmd, parse_ffprobe, run_ffprobe
from vdtransfer.common.settings import get_settings
from vdtransfer.domain.entities.probe import RawProbeResult
from vdtransfer.domain.errors import ProbeError
from vdtransfer.domain.ports.probe import VideoProbePort

logger = get_logger(__name__)


class FFprobeAdapter(VideoProbePort):
    """
    Infrastructure adapter implementing VideoProbePort using `ffprobe`.
    Stateless after construction, so one instance can serve several threads.
    """

    def __init__(self, ffprobe_bin: Optional[str] = None, timeout_sec: Optional[int] = None):
        cfg = get_settings()
        candidate = ffprobe_bin or cfg.ffprobe.bin
        if Path(candidate).name == candidate:
            # bare name: resolve on PATH for nicer errors
            resolved = shutil.which(candidate)
            if not resolved:
                raise ProbeError(f"{candidate} not found on PATH; set FFPROBE_BIN (or FFPROBE__BIN) or install ffmpeg.")
            candidate = resolved
        elif not Path(candidate).is_file():
            raise ProbeError(f"ffprobe not found: {candidate}")

        self.ffprobe_bin = candidate
        self.timeout_sec = int(timeout_sec or cfg.ffprobe.timeout_sec)
        self.log_level = cfg.ffprobe.log_level

    # ---- Port API -------------------------------------------------------------
    def probe(self, path: Path) -> RawProbeResult:
        if not path or not str(path).strip():
            raise ProbeError("No path provided to probe().")
        if not Path(path).is_file():
            raise ProbeError(f"File not found: {path}")

        cmd = build_ffprobe_cmd(path, ffprobe_bin=self.ffprobe_bin, log_level=self.log_level)
        data = run_ffprobe(cmd, timeout_sec=self.timeout_sec)
        raw = parse_ffprobe(data)
        logger.debug("probed %s: %d stream(s)", path, len(raw.streams))
        return raw
