# vdtransfer/services/api/deps.py
from __future__ import annotations
from fastapi import Depends

from vdtransfer.domain.ports.probe import VideoProbePort
from vdtransfer.services.compare.service import CompareService
from vdtransfer.services.probe.ffprobe_adapter import FFprobeAdapter


def get_video_probe() -> VideoProbePort:
    """
    Provide a VideoProbePort implementation (ffprobe) via DI.
    Tests override this with a fake.
    """
    return FFprobeAdapter()


def get_compare_service(probe: VideoProbePort = Depends(get_video_probe)) -> CompareService:
    return CompareService(probe)


def get_raw_compare_service() -> CompareService:
    return CompareService()
