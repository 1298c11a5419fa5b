from vdtransfer.services.schemas.descriptor import (
    FractionField,
    VideoDescriptorSchema,
)
from vdtransfer.services.schemas.compat import (
    CompatProbeRequest,
    CompatRequest,
    CompatResponse,
    ProbedFileSchema,
)
__all__ = [
    "FractionField",
    "VideoDescriptorSchema",
    "CompatProbeRequest",
    "CompatRequest",
    "CompatResponse",
    "ProbedFileSchema",
]
