from vdtransfer.domain.values.fraction import DECIMAL_FALLBACK_SCALE, ExactFraction

__all__ = [
    "DECIMAL_FALLBACK_SCALE",
    "ExactFraction",
]
