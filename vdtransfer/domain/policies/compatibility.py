# vdtransfer/domain/policies/compatibility.py
from __future__ import annotations

from typing import List, Optional

from vdtransfer.domain.entities.video_descriptor import VideoDescriptor

# 0.01 fps is plenty to tell common exact rationals apart (29.97 vs 30).
FPS_TOLERANCE = 0.01
DURATION_TOLERANCE_SEC = 0.5


def _num(x: float) -> str:
    """Up to three decimals, trailing zeros dropped: 25.0 -> "25", 29.97003 -> "29.97"."""
    text = f"{x:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def _labels_differ(a: Optional[str], b: Optional[str]) -> bool:
    if not a or not a.strip() or not b or not b.strip():
        return False
    return a.strip().casefold() != b.strip().casefold()


class CompatibilityChecker:
    """
    Compares a reference and a target descriptor and explains what will make
    frame-accurate alignment / detail transfer hard.

    Rules run in a fixed order and are independent of each other:
      interlacing, frame rate, duration, bit depth, color space,
      transfer, primaries, sample aspect ratio.
    """

    def check(self, reference: VideoDescriptor, target: VideoDescriptor) -> List[str]:
        warnings: List[str] = []

        if reference.is_interlaced:
            warnings.append(
                "Reference is interlaced; IVTC/detelecine (or deinterlace) is required "
                "before reliable frame matching."
            )

        if reference.frame_rate.is_valid and target.frame_rate.is_valid:
            ref_fps, tgt_fps = reference.fps, target.fps
            if abs(ref_fps - tgt_fps) > FPS_TOLERANCE:
                warnings.append(
                    f"Frame rate mismatch (reference {_num(ref_fps)} fps vs target {_num(tgt_fps)} fps). "
                    "Expect non-1:1 mapping without normalization."
                )

        # container-level symptom of edits
        dur_diff = abs((reference.duration - target.duration).total_seconds())
        if dur_diff > DURATION_TOLERANCE_SEC:
            warnings.append(
                f"Duration differs by ~{_num(dur_diff)}s. "
                "Expect edits/extra frames; use piecewise time alignment."
            )

        if reference.bit_depth and target.bit_depth and reference.bit_depth != target.bit_depth:
            warnings.append(
                f"Bit depth mismatch (reference {reference.bit_depth}-bit vs target {target.bit_depth}-bit). "
                "Use float/linear pipeline; output encode should be >=10-bit to avoid banding."
            )

        if _labels_differ(reference.color_space, target.color_space):
            warnings.append(
                f"Color space differs (reference {reference.color_space} vs target {target.color_space}). "
                "Expect different luma/chroma behavior; match in linear light carefully."
            )

        if _labels_differ(reference.color_transfer, target.color_transfer):
            warnings.append(
                f"Transfer characteristics differ (reference {reference.color_transfer} "
                f"vs target {target.color_transfer}). "
                "Gamma mismatch may affect matching/transfer if not linearized correctly."
            )

        if _labels_differ(reference.color_primaries, target.color_primaries):
            warnings.append(
                f"Color primaries differ (reference {reference.color_primaries} "
                f"vs target {target.color_primaries}). "
                "Consider color management if you later do chroma operations."
            )

        ref_sar, tgt_sar = reference.sample_aspect_ratio, target.sample_aspect_ratio
        # exact fraction comparison; 8:9 vs 1:1 is the usual DVD-vs-master case
        if ref_sar.is_valid and tgt_sar.is_valid and ref_sar != tgt_sar:
            warnings.append(
                f"Sample aspect ratio differs (reference {ref_sar} vs target {tgt_sar}). "
                "Treat reference as anamorphic; do alignment in stored raster "
                "then compose with output scaling."
            )

        return warnings


_default = CompatibilityChecker()


def check(reference: VideoDescriptor, target: VideoDescriptor) -> List[str]:
    return _default.check(reference, target)
