# tests/services/conftest.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

from vdtransfer.common.probe.ffprobe_helpers import parse_ffprobe
from vdtransfer.domain.entities.probe import RawProbeResult
from vdtransfer.domain.errors import ProbeError
from vdtransfer.services.api.app import create_app
from vdtransfer.services.api.deps import get_video_probe


class FakeProbe:
    """In-memory VideoProbePort keyed by file name."""

    def __init__(self, docs: Dict[str, Dict[str, Any]]):
        self._docs = docs
        self.calls: List[Path] = []

    def probe(self, path: Path) -> RawProbeResult:
        self.calls.append(Path(path))
        name = Path(path).name
        if name not in self._docs:
            raise ProbeError(f"File not found: {path}")
        return parse_ffprobe(self._docs[name])


@pytest.fixture()
def fake_probe(dvd_ffprobe_json, bluray_ffprobe_json) -> FakeProbe:
    return FakeProbe({
        "dvd.mkv": dvd_ffprobe_json,
        "bluray.mkv": bluray_ffprobe_json,
        "audio_only.mka": {"streams": [{"codec_type": "audio", "codec_name": "flac"}]},
    })


@pytest.fixture()
def api_client(fake_probe):
    """TestClient whose probe dependency is the in-memory FakeProbe."""
    app = create_app()
    app.dependency_overrides[get_video_probe] = lambda: fake_probe
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
