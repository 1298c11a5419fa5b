from datetime import timedelta

import math

from vdtransfer.domain.entities.probe import RawFormat, RawProbeResult, RawStream
from vdtransfer.domain.values.fraction import ExactFraction


def test_raw_probe_result_defaults():
    raw = RawProbeResult()
    assert raw.streams == ()
    assert raw.format is None

    s = RawStream()
    assert s.codec_type is None and s.width is None and s.field_order is None
    assert RawFormat().tags == {}


def test_descriptor_convenience_properties(make_descriptor):
    d = make_descriptor(frame_rate=ExactFraction(24000, 1001), duration=timedelta(minutes=22, seconds=4.5))
    assert 23.97 < d.fps < 23.98
    assert d.duration_seconds == 1324.5
    assert math.isnan(make_descriptor(frame_rate=ExactFraction.INVALID).fps)
