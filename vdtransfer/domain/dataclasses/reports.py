# vdtransfer/domain/dataclasses/reports.py
from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from vdtransfer.domain.entities.video_descriptor import VideoDescriptor


def format_descriptor(d: Optional[VideoDescriptor]) -> str:
    """Human-readable summary block for one descriptor."""
    if d is None:
        return "(not loaded)"

    fps = d.fps
    fps_text = "unknown" if math.isnan(fps) else f"{fps:.3f}".rstrip("0").rstrip(".")
    interlace = "Yes" if d.is_interlaced else "No"
    if d.field_order:
        interlace += f" ({d.field_order})"

    lines = [
        f"Path: {d.path}",
        f"Stored: {d.stored_width}x{d.stored_height}",
        f"FPS: {d.frame_rate} ({fps_text})",
        f"Interlaced: {interlace}",
        f"SAR: {d.sample_aspect_ratio}  DAR: {d.display_aspect_ratio}",
        f"PixFmt: {d.pixel_format or '-'}  BitDepth: {d.bit_depth or 'unknown'}",
    ]
    if d.color_space or d.color_primaries or d.color_transfer:
        lines.append(f"Color: {d.color_space or '-'} / {d.color_primaries or '-'} / {d.color_transfer or '-'}")
    lines.append(f"Duration: {d.duration}")
    return "\n".join(lines)


@dataclass
class ComparisonReport:
    """Outcome of comparing a reference file against a target file."""
    reference: VideoDescriptor
    target: VideoDescriptor
    warnings: List[str] = field(default_factory=list)
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None

    @property
    def ok(self) -> bool:
        return not self.warnings

    def as_text(self) -> str:
        parts = [
            "Reference:",
            format_descriptor(self.reference),
            "",
            "Target:",
            format_descriptor(self.target),
        ]
        if self.warnings:
            parts += ["", "Warnings:"]
            parts += [f"  - {w}" for w in self.warnings]
        return "\n".join(parts)
