# services/schemas/compat.py
from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from vdtransfer.services.schemas.descriptor import VideoDescriptorSchema


class ProbedFileSchema(BaseModel):
    path: str = Field(..., min_length=1, examples=["/media/ref/episode01.mkv"])
    # raw `ffprobe -show_format -show_streams -of json` document
    probe: Dict[str, Any] = Field(default_factory=dict)


class CompatRequest(BaseModel):
    reference: ProbedFileSchema
    target: ProbedFileSchema


class CompatProbeRequest(BaseModel):
    reference_path: str = Field(..., min_length=1)
    target_path: str = Field(..., min_length=1)


class CompatResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    ok: bool
    warnings: List[str] = Field(default_factory=list)
    reference: VideoDescriptorSchema
    target: VideoDescriptorSchema
