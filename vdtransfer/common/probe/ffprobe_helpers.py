# vdtransfer/common/probe/ffprobe_helpers.py
from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional
import json
import math
import shlex
import subprocess

from vdtransfer.common.logging import get_logger
from vdtransfer.domain.entities.probe import RawFormat, RawProbeResult, RawStream
from vdtransfer.domain.errors import ProbeError

logger = get_logger(__name__)


def build_ffprobe_cmd(
    input_path: str | Path,
    *,
    ffprobe_bin: str = "ffprobe",
    log_level: str = "error",
    extra_args: Iterable[str] | None = None,
) -> List[str]:
    """
    Build an ffprobe command that emits the JSON parse_ffprobe() understands.
    """
    if isinstance(input_path, Path):
        input_path = str(input_path)
    base = [
        ffprobe_bin,
        "-hide_banner",
        "-v", log_level,
        "-show_format",
        "-show_streams",
        "-of", "json",
        "--",  # stop option parsing in case of weird filenames
        input_path,
    ]
    if extra_args:
        # keep them ahead of "--"
        base = base[:-2] + list(extra_args) + base[-2:]
    return base


def run_ffprobe(cmd: List[str], *, timeout_sec: Optional[int] = None) -> Dict[str, Any]:
    """
    Execute ffprobe and return the parsed JSON document. Every failure mode
    (spawn error, timeout, non-zero exit, empty or invalid output) is raised
    as ProbeError.
    """
    logger.debug("ffprobe cmd: %s", " ".join(shlex.quote(p) for p in cmd))
    try:
        cp = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout_sec, check=False)
    except subprocess.TimeoutExpired as e:
        raise ProbeError(f"ffprobe timed out after {timeout_sec}s", stderr=str(e)) from e
    except OSError as e:
        raise ProbeError("Failed to execute ffprobe (OS error).", stderr=str(e)) from e

    if cp.returncode != 0:
        raise ProbeError(
            f"ffprobe failed (exit code {cp.returncode})",
            stderr=(cp.stderr or "").strip() or None,
            returncode=cp.returncode,
        )

    out = (cp.stdout or "").strip()
    if not out:
        raise ProbeError("ffprobe returned no output", stderr=(cp.stderr or "").strip() or None)

    try:
        data = json.loads(out)
    except json.JSONDecodeError as e:
        preview = out if len(out) <= 2000 else out[:2000] + "..."
        logger.exception("Failed to parse ffprobe JSON")
        raise ProbeError("ffprobe produced invalid JSON", stderr=preview) from e

    if not isinstance(data, dict):
        raise ProbeError("ffprobe JSON is not an object")
    return data


# ---- tolerant field coercion --------------------------------------------------
def _maybe_int(x: Any) -> Optional[int]:
    if x is None or isinstance(x, bool):
        return None
    try:
        f = float(x)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(f):
        return None
    return int(f)


def _maybe_float(x: Any) -> Optional[float]:
    if x is None or isinstance(x, bool):
        return None
    try:
        f = float(x)
    except (TypeError, ValueError, OverflowError):
        return None
    return f if math.isfinite(f) else None


def _maybe_str(x: Any) -> Optional[str]:
    if x is None or isinstance(x, (dict, list)):
        return None
    return str(x)


def _as_mapping(x: Any) -> Mapping[str, Any]:
    return x if isinstance(x, Mapping) else {}


def _parse_stream(s: Mapping[str, Any]) -> RawStream:
    return RawStream(
        index=_maybe_int(s.get("index")),
        codec_type=_maybe_str(s.get("codec_type")),
        codec_name=_maybe_str(s.get("codec_name")),
        width=_maybe_int(s.get("width")),
        height=_maybe_int(s.get("height")),
        pix_fmt=_maybe_str(s.get("pix_fmt")),
        avg_frame_rate=_maybe_str(s.get("avg_frame_rate")),
        r_frame_rate=_maybe_str(s.get("r_frame_rate")),
        sample_aspect_ratio=_maybe_str(s.get("sample_aspect_ratio")),
        display_aspect_ratio=_maybe_str(s.get("display_aspect_ratio")),
        field_order=_maybe_str(s.get("field_order")),
        color_space=_maybe_str(s.get("color_space")),
        color_primaries=_maybe_str(s.get("color_primaries")),
        color_transfer=_maybe_str(s.get("color_transfer")),
        sample_rate=_maybe_str(s.get("sample_rate")),
        channels=_maybe_int(s.get("channels")),
        channel_layout=_maybe_str(s.get("channel_layout")),
        bit_rate=_maybe_str(s.get("bit_rate")),
    )


def _parse_format(fmt: Mapping[str, Any]) -> RawFormat:
    tags = {str(k): str(v) for k, v in _as_mapping(fmt.get("tags")).items() if v is not None}
    return RawFormat(
        filename=_maybe_str(fmt.get("filename")),
        format_name=_maybe_str(fmt.get("format_name")),
        format_long_name=_maybe_str(fmt.get("format_long_name")),
        start_time=_maybe_float(fmt.get("start_time")),
        duration=_maybe_float(fmt.get("duration")),
        size=_maybe_int(fmt.get("size")),
        bit_rate=_maybe_int(fmt.get("bit_rate")),
        probe_score=_maybe_int(fmt.get("probe_score")),
        nb_streams=_maybe_int(fmt.get("nb_streams")),
        tags=tags,
    )


def parse_ffprobe(data: Mapping[str, Any] | None) -> RawProbeResult:
    """
    Map ffprobe JSON (`-show_format -show_streams -of json`) onto RawProbeResult.
    Missing or wrong-typed fields become None; safe to call with fixture JSON.
    """
    data = _as_mapping(data)
    raw_streams = data.get("streams")
    if not isinstance(raw_streams, list):
        raw_streams = []

    streams = tuple(_parse_stream(s) for s in raw_streams if isinstance(s, Mapping))
    fmt = data.get("format")
    return RawProbeResult(
        streams=streams,
        format=_parse_format(fmt) if isinstance(fmt, Mapping) else None,
    )
