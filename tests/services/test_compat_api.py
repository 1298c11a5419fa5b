from __future__ import annotations


def test_healthz(api_client):
    r = api_client.get("/healthz")
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True
    assert body["app"] == "vdtransfer"


def test_compat_from_probe_json(api_client, dvd_ffprobe_json, bluray_ffprobe_json):
    r = api_client.post("/api/compat", json={
        "reference": {"path": "/media/dvd.mkv", "probe": dvd_ffprobe_json},
        "target": {"path": "/media/bluray.mkv", "probe": bluray_ffprobe_json},
    })
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["ok"] is False
    assert len(body["warnings"]) == 8
    assert body["reference"]["frameRate"] == "30000/1001"
    assert body["reference"]["sampleAspectRatio"] == "8/9"
    assert body["target"]["bitDepth"] == 10


def test_compat_identical_is_ok(api_client, bluray_ffprobe_json):
    r = api_client.post("/api/compat", json={
        "reference": {"path": "/a.mkv", "probe": bluray_ffprobe_json},
        "target": {"path": "/b.mkv", "probe": bluray_ffprobe_json},
    })
    assert r.status_code == 200
    assert r.json()["ok"] is True
    assert r.json()["warnings"] == []


def test_compat_without_video_stream_is_422(api_client, bluray_ffprobe_json):
    r = api_client.post("/api/compat", json={
        "reference": {"path": "/a.mka", "probe": {"streams": [{"codec_type": "audio"}]}},
        "target": {"path": "/b.mkv", "probe": bluray_ffprobe_json},
    })
    assert r.status_code == 422
    assert r.json()["path"] == "/a.mka"


def test_compat_probe_endpoint(api_client, fake_probe):
    r = api_client.post("/api/compat/probe", json={
        "reference_path": "/media/dvd.mkv",
        "target_path": "/media/bluray.mkv",
    })
    assert r.status_code == 200, r.text
    assert r.json()["reference"]["storedWidth"] == 720
    assert len(fake_probe.calls) == 2


def test_compat_probe_failure_is_502(api_client):
    r = api_client.post("/api/compat/probe", json={
        "reference_path": "/media/dvd.mkv",
        "target_path": "/media/missing.mkv",
    })
    assert r.status_code == 502
    assert "File not found" in r.json()["detail"]


def test_healthz_reports_missing_ffprobe(api_client, monkeypatch):
    monkeypatch.setenv("FFPROBE__BIN", "/definitely/not/here/ffprobe")
    from vdtransfer.common.settings import get_settings
    get_settings.cache_clear()
    assert api_client.get("/healthz").json()["ffprobe"] is None
