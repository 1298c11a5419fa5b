# tests/conftest.py
from __future__ import annotations

from datetime import timedelta
from typing import Any, Callable, Dict

import pytest

from vdtransfer.common.settings import get_settings
from vdtransfer.domain.entities.video_descriptor import VideoDescriptor
from vdtransfer.domain.values.fraction import ExactFraction


@pytest.fixture(autouse=True)
def _fresh_settings():
    # env tweaks in one test must not leak through the lru_cache
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def make_descriptor() -> Callable[..., VideoDescriptor]:
    """Factory for a progressive 1080p25 8-bit BT.709 descriptor; override any field."""
    def _make(**overrides: Any) -> VideoDescriptor:
        base: Dict[str, Any] = dict(
            path="/media/ref.mkv",
            stored_width=1920,
            stored_height=1080,
            frame_rate=ExactFraction(25, 1),
            is_interlaced=False,
            field_order="progressive",
            sample_aspect_ratio=ExactFraction(1, 1),
            display_aspect_ratio=ExactFraction(16, 9),
            pixel_format="yuv420p",
            bit_depth=8,
            color_space="bt709",
            color_primaries="bt709",
            color_transfer="bt709",
            duration=timedelta(seconds=60),
        )
        base.update(overrides)
        return VideoDescriptor(**base)

    return _make


@pytest.fixture()
def dvd_ffprobe_json() -> Dict[str, Any]:
    """Anamorphic NTSC DVD rip as ffprobe reports it."""
    return {
        "streams": [
            {
                "index": 0,
                "codec_type": "video",
                "codec_name": "mpeg2video",
                "width": 720,
                "height": 480,
                "pix_fmt": "yuv420p",
                "sample_aspect_ratio": "8:9",
                "display_aspect_ratio": "4:3",
                "field_order": "tt",
                "avg_frame_rate": "30000/1001",
                "r_frame_rate": "30000/1001",
                "color_space": "smpte170m",
                "color_primaries": "smpte170m",
                "color_transfer": "smpte170m",
            },
            {
                "index": 1,
                "codec_type": "audio",
                "codec_name": "ac3",
                "sample_rate": "48000",
                "channels": 6,
                "channel_layout": "5.1(side)",
                "bit_rate": "448000",
            },
        ],
        "format": {
            "filename": "/media/ref/episode01.mkv",
            "format_name": "matroska,webm",
            "duration": "1324.123000",
            "size": "1073741824",
            "bit_rate": "6487000",
            "probe_score": 100,
            "nb_streams": 2,
            "tags": {"encoder": "libebml v1.4.2"},
        },
    }


@pytest.fixture()
def bluray_ffprobe_json() -> Dict[str, Any]:
    """Progressive 10-bit HD master of the same episode."""
    return {
        "streams": [
            {
                "index": 0,
                "codec_type": "video",
                "codec_name": "hevc",
                "width": 1920,
                "height": 1080,
                "pix_fmt": "yuv420p10le",
                "sample_aspect_ratio": "1:1",
                "display_aspect_ratio": "16:9",
                "field_order": "progressive",
                "avg_frame_rate": "24000/1001",
                "r_frame_rate": "24000/1001",
                "color_space": "bt709",
                "color_primaries": "bt709",
                "color_transfer": "bt709",
            },
        ],
        "format": {
            "format_name": "matroska,webm",
            "duration": "1320.000000",
        },
    }
