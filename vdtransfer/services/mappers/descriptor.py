# vdtransfer/services/mappers/descriptor.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from vdtransfer.domain.entities.video_descriptor import VideoDescriptor
from vdtransfer.services.schemas.descriptor import VideoDescriptorSchema


@dataclass(frozen=True)
class SerializationOptions:
    """
    How descriptors are written. Passed to every dump call; there is no
    module-level serializer configuration.
    """
    camel_case: bool = True
    indent: Optional[int] = 2
    exclude_none: bool = True


DEFAULT_OPTIONS = SerializationOptions()


def to_schema(d: VideoDescriptor) -> VideoDescriptorSchema:
    return VideoDescriptorSchema(
        path=d.path,
        stored_width=d.stored_width,
        stored_height=d.stored_height,
        frame_rate=d.frame_rate,
        is_interlaced=d.is_interlaced,
        field_order=d.field_order,
        sample_aspect_ratio=d.sample_aspect_ratio,
        display_aspect_ratio=d.display_aspect_ratio,
        pixel_format=d.pixel_format,
        bit_depth=d.bit_depth,
        color_space=d.color_space,
        color_primaries=d.color_primaries,
        color_transfer=d.color_transfer,
        duration_seconds=d.duration_seconds,
    )


def from_schema(s: VideoDescriptorSchema) -> VideoDescriptor:
    return VideoDescriptor(
        path=s.path,
        stored_width=s.stored_width,
        stored_height=s.stored_height,
        frame_rate=s.frame_rate,
        is_interlaced=s.is_interlaced,
        field_order=s.field_order,
        sample_aspect_ratio=s.sample_aspect_ratio,
        display_aspect_ratio=s.display_aspect_ratio,
        pixel_format=s.pixel_format,
        bit_depth=s.bit_depth,
        color_space=s.color_space,
        color_primaries=s.color_primaries,
        color_transfer=s.color_transfer,
        duration=timedelta(seconds=s.duration_seconds),
    )


def dump_descriptor(d: VideoDescriptor, options: SerializationOptions) -> str:
    return to_schema(d).model_dump_json(
        by_alias=options.camel_case,
        indent=options.indent,
        exclude_none=options.exclude_none,
    )


def load_descriptor(text: str | bytes) -> VideoDescriptor:
    """Inverse of dump_descriptor(); camelCase and snake_case keys are both accepted."""
    return from_schema(VideoDescriptorSchema.model_validate_json(text))
