from __future__ import annotations
from pathlib import Path
from typing import Protocol
from vdtransfer.domain.entities.probe import RawProbeResult

class VideoProbePort(Protocol):
    def probe(self, path: Path) -> RawProbeResult: ...
