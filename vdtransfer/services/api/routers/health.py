# vdtransfer/services/api/routers/health.py
from __future__ import annotations
import shutil
from pathlib import Path

from fastapi import APIRouter
from vdtransfer.common.settings import get_settings

router = APIRouter()


@router.get("/healthz")
def healthz():
    s = get_settings()
    # report whether probing can work, without spawning ffprobe
    ffprobe = s.ffprobe.bin
    found = shutil.which(ffprobe) if Path(ffprobe).name == ffprobe else (ffprobe if Path(ffprobe).is_file() else None)
    return {
        "ok": True,
        "app": s.app_name,
        "env": s.app_env,
        "ffprobe": found,
    }
