# vdtransfer/common/settings.py
from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class APIConfig(BaseModel):
    prefix: str = "/api"

    cors_allow_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    cors_allow_methods: List[str] = Field(default_factory=lambda: ["GET", "POST", "OPTIONS"])
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = False


class FFProbeConfig(BaseModel):
    bin: str = "ffprobe"  # bare name is resolved on PATH by the adapter
    timeout_sec: int = Field(30, ge=1)
    log_level: str = "error"  # quiet|panic|fatal|error|warning|info|verbose|debug|trace


class ConcurrencyConfig(BaseModel):
    # reference + target are probed side by side
    ffprobe_workers: int = Field(2, ge=1, le=16)


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "vdtransfer"
    app_env: str = "development"  # development|test|production
    log_level: str = "INFO"

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    ffprobe: FFProbeConfig = FFProbeConfig()
    concurrency: ConcurrencyConfig = ConcurrencyConfig()

    # flat FFPROBE_BIN, honored unless FFPROBE__BIN is also set
    ffprobe_bin: Optional[str] = Field(default=None, validation_alias="FFPROBE_BIN", exclude=True)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # e.g. FFPROBE__TIMEOUT_SEC=10
        case_sensitive=False,
        extra="ignore",
    )

    @model_validator(mode="after")
    def _apply_ffprobe_bin(self) -> "Settings":
        if self.ffprobe_bin and "bin" not in self.ffprobe.model_fields_set:
            self.ffprobe = self.ffprobe.model_copy(update={"bin": self.ffprobe_bin})
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from vdtransfer.common.settings import get_settings
        cfg = get_settings()
    Tests that tweak the environment should call get_settings.cache_clear().
    """
    return Settings()
