# services/schemas/descriptor.py
from __future__ import annotations

from typing import Annotated, Any, Mapping, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer, WithJsonSchema
from pydantic.alias_generators import to_camel

from vdtransfer.domain.values.fraction import ExactFraction


def _lookup(obj: Mapping[str, Any], *names: str) -> Any:
    lowered = {str(k).lower(): v for k, v in obj.items()}
    for n in names:
        if n in lowered:
            return lowered[n]
    return None


def coerce_fraction(v: Any) -> ExactFraction:
    """
    Accept "N/D" / "N:D" strings, {"num": n, "den": d} objects and plain ints.
    Anything else becomes INVALID, mirroring ExactFraction.parse().
    """
    if isinstance(v, ExactFraction):
        return v
    if isinstance(v, str):
        return ExactFraction.parse(v)
    if isinstance(v, Mapping):
        num = _lookup(v, "num", "numerator")
        den = _lookup(v, "den", "denominator")
        try:
            return ExactFraction.reduce(int(num or 0), int(den or 0))
        except (TypeError, ValueError):
            return ExactFraction.INVALID
    if isinstance(v, int) and not isinstance(v, bool):
        return ExactFraction(v, 1)
    return ExactFraction.INVALID


# Serialized as its exact "N/D" text ("0/0" when invalid), never as a decimal.
FractionField = Annotated[
    ExactFraction,
    BeforeValidator(coerce_fraction),
    PlainSerializer(str, return_type=str),
    WithJsonSchema({"type": "string", "pattern": r"^-?\d+/\d+$", "examples": ["30000/1001"]}),
]


class VideoDescriptorSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
        frozen=True,
    )

    path: str = Field(..., examples=["/media/ref/episode01.mkv"])

    stored_width: int = Field(..., gt=0, examples=[720])
    stored_height: int = Field(..., gt=0, examples=[480])

    frame_rate: FractionField = ExactFraction.INVALID

    is_interlaced: bool = False
    field_order: Optional[str] = Field(None, examples=["tt", "progressive"])

    sample_aspect_ratio: FractionField = ExactFraction(1, 1)
    display_aspect_ratio: FractionField

    pixel_format: Optional[str] = Field(None, examples=["yuv420p10le"])
    bit_depth: int = Field(0, ge=0, description="0 means unknown")

    color_space: Optional[str] = None
    color_primaries: Optional[str] = None
    color_transfer: Optional[str] = None

    duration_seconds: float = Field(0.0, ge=0)
