# vdtransfer/domain/entities/probe.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class RawStream:
    """
    One stream entry exactly as the probing tool reported it.
    Every field is optional; nothing here is validated or interpreted.
    """
    index: Optional[int] = None
    codec_type: Optional[str] = None  # "video" | "audio" | "subtitle" | ...
    codec_name: Optional[str] = None

    # video-ish
    width: Optional[int] = None
    height: Optional[int] = None
    pix_fmt: Optional[str] = None
    avg_frame_rate: Optional[str] = None  # "30000/1001"
    r_frame_rate: Optional[str] = None
    sample_aspect_ratio: Optional[str] = None  # "8:9"
    display_aspect_ratio: Optional[str] = None  # "4:3"
    field_order: Optional[str] = None  # "progressive" | "tt" | "bb" | ...
    color_space: Optional[str] = None
    color_primaries: Optional[str] = None
    color_transfer: Optional[str] = None

    # audio-ish
    sample_rate: Optional[str] = None
    channels: Optional[int] = None
    channel_layout: Optional[str] = None
    bit_rate: Optional[str] = None


@dataclass(frozen=True)
class RawFormat:
    """Container-level fields (ffprobe "format" section)."""
    filename: Optional[str] = None
    format_name: Optional[str] = None
    format_long_name: Optional[str] = None
    start_time: Optional[float] = None
    duration: Optional[float] = None  # seconds
    size: Optional[int] = None  # bytes
    bit_rate: Optional[int] = None
    probe_score: Optional[int] = None
    nb_streams: Optional[int] = None
    tags: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class RawProbeResult:
    """
    Loosely-typed probe output: ordered streams plus optional container info.
    Produced by a probe adapter, consumed read-only by the normalizer.
    """
    streams: Tuple[RawStream, ...] = ()
    format: Optional[RawFormat] = None
