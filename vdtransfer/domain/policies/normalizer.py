# vdtransfer/domain/policies/normalizer.py
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from vdtransfer.domain.entities.probe import RawProbeResult, RawStream
from vdtransfer.domain.entities.video_descriptor import VideoDescriptor
from vdtransfer.domain.errors import NormalizationError
from vdtransfer.domain.values.fraction import ExactFraction

SQUARE_PIXELS = ExactFraction(1, 1)

# Field-order labels that do not indicate interlaced scanning.
PROGRESSIVE_LABELS = {"progressive", "unknown"}

# Chroma-subsampling codes that show up as the first digit run in pix_fmt
# names ("yuv420p", "yuv444p"); they are not bit depths.
CHROMA_SUBSAMPLING_CODES = {420, 422, 444}

DEFAULT_BIT_DEPTH = 8

_DIGITS = re.compile(r"[0-9]+")


def _blank_to_none(s: Optional[str]) -> Optional[str]:
    if s is None or not s.strip():
        return None
    return s.strip()


def infer_bit_depth(pix_fmt: Optional[str]) -> int:
    """
    Guess bits per component from an ffmpeg pix_fmt name.

        yuv420p     -> 8
        yuv420p10le -> 10
        yuv422p12le -> 12
        gbrp16le    -> 16
        None / ""   -> 0 (unknown)
    """
    s = _blank_to_none(pix_fmt)
    if s is None:
        return 0

    # "...p10..." style: digits right after the first 'p'
    p = s.find("p")
    if p >= 0:
        after_p = _DIGITS.match(s, p + 1)
        if after_p:
            return int(after_p.group())

    first_run = _DIGITS.search(s)
    if first_run and int(first_run.group()) in CHROMA_SUBSAMPLING_CODES:
        return DEFAULT_BIT_DEPTH

    return DEFAULT_BIT_DEPTH


def is_interlaced_field_order(field_order: Optional[str]) -> bool:
    label = _blank_to_none(field_order)
    return label is not None and label.casefold() not in PROGRESSIVE_LABELS


def pick_video_stream(raw: RawProbeResult) -> Optional[RawStream]:
    """
    Largest-area stream tagged "video"; the first one wins on a tie.
    Streams without a codec_type are ignored.
    """
    best: Optional[RawStream] = None
    best_area = 0
    for s in raw.streams:
        if (s.codec_type or "").strip().casefold() != "video":
            continue
        area = (s.width or 0) * (s.height or 0)
        if best is None or area > best_area:
            best, best_area = s, area
    return best


@dataclass(frozen=True)
class NormalizationResult:
    """Descriptor-or-error outcome of try_normalize()."""
    descriptor: Optional[VideoDescriptor] = None
    error: Optional[NormalizationError] = None

    @property
    def ok(self) -> bool:
        return self.descriptor is not None

    def unwrap(self) -> VideoDescriptor:
        if self.descriptor is not None:
            return self.descriptor
        if self.error is not None:
            raise self.error
        raise ValueError("NormalizationResult holds neither a descriptor nor an error")


class MetadataNormalizer:
    """
    Turns a RawProbeResult into a VideoDescriptor.

    Parse failures of individual fields are absorbed by fallback chains
    (avg -> nominal frame rate, SAR -> 1:1, DAR -> derived from raster).
    The only fatal conditions are a missing video stream and a stream
    without positive width/height.
    """

    # ---------------- public ----------------

    def normalize(self, path: str, raw: RawProbeResult) -> VideoDescriptor:
        if not path or not str(path).strip():
            raise ValueError("path is empty")

        video = pick_video_stream(raw)
        if video is None:
            raise NormalizationError(path, "probe did not return a video stream")

        stored_w = video.width or 0
        stored_h = video.height or 0
        if stored_w <= 0 or stored_h <= 0:
            raise NormalizationError(path, "video stream width/height missing or invalid")

        # stays INVALID when neither rate parses: unknown, not 0 fps
        fps = ExactFraction.parse(video.avg_frame_rate).or_else(ExactFraction.parse(video.r_frame_rate))

        sar = ExactFraction.parse(video.sample_aspect_ratio).or_else(SQUARE_PIXELS)
        dar = ExactFraction.parse(video.display_aspect_ratio)
        if not dar.is_valid:
            # DAR = (W * SAR) / H
            dar = ExactFraction.reduce(stored_w * sar.numerator, stored_h * sar.denominator)

        pix_fmt = _blank_to_none(video.pix_fmt)

        return VideoDescriptor(
            path=path,
            stored_width=stored_w,
            stored_height=stored_h,
            frame_rate=fps,
            is_interlaced=is_interlaced_field_order(video.field_order),
            field_order=_blank_to_none(video.field_order),
            sample_aspect_ratio=sar,
            display_aspect_ratio=dar,
            pixel_format=pix_fmt,
            bit_depth=infer_bit_depth(pix_fmt),
            color_space=_blank_to_none(video.color_space),
            color_primaries=_blank_to_none(video.color_primaries),
            color_transfer=_blank_to_none(video.color_transfer),
            duration=self._duration(raw),
        )

    def try_normalize(self, path: str, raw: RawProbeResult) -> NormalizationResult:
        try:
            return NormalizationResult(descriptor=self.normalize(path, raw))
        except NormalizationError as e:
            return NormalizationResult(error=e)

    # ---------------- internals ----------------

    @staticmethod
    def _duration(raw: RawProbeResult) -> timedelta:
        seconds = raw.format.duration if raw.format else None
        if seconds is not None and seconds > 0:
            return timedelta(seconds=seconds)
        return timedelta(0)


_default = MetadataNormalizer()


def normalize(path: str, raw: RawProbeResult) -> VideoDescriptor:
    return _default.normalize(path, raw)


def try_normalize(path: str, raw: RawProbeResult) -> NormalizationResult:
    return _default.try_normalize(path, raw)
