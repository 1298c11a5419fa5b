from __future__ import annotations

import logging

import pytest

from vdtransfer.common.probe.ffprobe_helpers import parse_ffprobe
from vdtransfer.domain.errors import NormalizationError, ProbeError
from vdtransfer.domain.values.fraction import ExactFraction
from vdtransfer.services.compare.service import CompareService


def test_describe_probes_and_normalizes(fake_probe):
    d = CompareService(fake_probe).describe("/media/dvd.mkv")
    assert d.path == "/media/dvd.mkv"
    assert d.display_aspect_ratio == ExactFraction(4, 3)
    assert [p.name for p in fake_probe.calls] == ["dvd.mkv"]


def test_compare_dvd_against_bluray(fake_probe, caplog):
    svc = CompareService(fake_probe)
    with caplog.at_level(logging.INFO):
        report = svc.compare("/media/dvd.mkv", "/media/bluray.mkv")

    assert sorted(p.name for p in fake_probe.calls) == ["bluray.mkv", "dvd.mkv"]
    assert not report.ok
    assert report.reference.stored_width == 720
    assert report.target.stored_width == 1920
    assert report.started_at is not None and report.finished_at is not None
    assert report.started_at <= report.finished_at

    prefixes = [w.split(" ")[0:2] for w in report.warnings]
    assert prefixes == [
        ["Reference", "is"],
        ["Frame", "rate"],
        ["Duration", "differs"],
        ["Bit", "depth"],
        ["Color", "space"],
        ["Transfer", "characteristics"],
        ["Color", "primaries"],
        ["Sample", "aspect"],
    ]
    assert "8 warning(s)" in caplog.text


def test_compare_same_file_is_clean(fake_probe):
    report = CompareService(fake_probe, max_workers=1).compare("/a/bluray.mkv", "/b/bluray.mkv")
    assert report.ok
    assert report.warnings == []


def test_compare_raw_needs_no_probe(dvd_ffprobe_json):
    svc = CompareService()
    raw = parse_ffprobe(dvd_ffprobe_json)
    report = svc.compare_raw("/r.mkv", raw, "/t.mkv", raw)
    # interlacing is a property of the reference alone
    assert len(report.warnings) == 1
    assert report.warnings[0].startswith("Reference is interlaced")


def test_without_probe_only_raw_compare_works():
    with pytest.raises(ProbeError):
        CompareService().compare("/a.mkv", "/b.mkv")
    with pytest.raises(ProbeError):
        CompareService().describe("/a.mkv")


def test_probe_errors_propagate(fake_probe):
    with pytest.raises(ProbeError):
        CompareService(fake_probe).compare("/media/dvd.mkv", "/media/missing.mkv")


def test_normalization_errors_propagate(fake_probe):
    with pytest.raises(NormalizationError):
        CompareService(fake_probe).compare("/media/audio_only.mka", "/media/dvd.mkv")
