# vdtransfer/domain/entities/video_descriptor.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Optional

from vdtransfer.domain.values.fraction import ExactFraction


@dataclass(frozen=True)
class VideoDescriptor:
    """
    Canonical description of one probed video file.

    Geometry is the *stored* raster (coded width/height), not the display
    raster; combine with sample_aspect_ratio to get the on-screen shape.

    Invariants kept by the normalizer:
      - stored_width / stored_height > 0
      - display_aspect_ratio is always valid
      - frame_rate may be INVALID, meaning "unknown" (never 0 fps)
      - bit_depth == 0 means unknown
    """
    path: str

    stored_width: int
    stored_height: int

    frame_rate: ExactFraction

    is_interlaced: bool
    field_order: Optional[str]

    sample_aspect_ratio: ExactFraction
    display_aspect_ratio: ExactFraction

    pixel_format: Optional[str]
    bit_depth: int

    color_space: Optional[str]
    color_primaries: Optional[str]
    color_transfer: Optional[str]

    duration: timedelta = field(default_factory=timedelta)

    @property
    def fps(self) -> float:
        return self.frame_rate.to_double()

    @property
    def duration_seconds(self) -> float:
        return self.duration.total_seconds()
