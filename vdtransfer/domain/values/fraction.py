# vdtransfer/domain/values/fraction.py
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

# Last-resort scale for inputs like "29.97" that arrive without a separator.
DECIMAL_FALLBACK_SCALE = 1_000_000

# Separators in priority order: "/" for frame rates, ":" for SAR/DAR.
_SEPARATORS = ("/", ":")

_INT_RE = re.compile(r"^\s*[+-]?[0-9]+\s*$")


def _parse_int(text: str) -> Optional[int]:
    if not _INT_RE.match(text):
        return None
    try:
        return int(text)
    except ValueError:
        # longer than the interpreter's int-string conversion limit
        return None


def _gcd(a: int, b: int) -> int:
    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return 1 if a == 0 else a


@dataclass(frozen=True, eq=False)
class ExactFraction:
    """
    Exact rational number with an explicit "invalid" state.

    A denominator of 0 marks the value as invalid (unknown). Invalid values
    propagate through arithmetic and never compare equal to a real number,
    so callers check ``is_valid`` instead of comparing against zero.

    The constructor only normalizes the sign of the denominator; use
    ``reduce`` (or ``parse``) to get lowest terms.
    """
    numerator: int
    denominator: int

    ZERO: ClassVar["ExactFraction"]
    INVALID: ClassVar["ExactFraction"]

    def __post_init__(self) -> None:
        if self.denominator < 0:
            object.__setattr__(self, "numerator", -self.numerator)
            object.__setattr__(self, "denominator", -self.denominator)

    # ---- construction ---------------------------------------------------------
    @classmethod
    def reduce(cls, numerator: int, denominator: int) -> "ExactFraction":
        if denominator == 0:
            return cls.INVALID
        if numerator == 0:
            return cls.ZERO
        g = _gcd(numerator, denominator)
        return cls(numerator // g, denominator // g)

    @classmethod
    def parse(cls, text: Optional[str]) -> "ExactFraction":
        """
        Parse "N/D", "N:D", a plain integer, or (lossy) a decimal number.
        Malformed input yields INVALID; this never raises.
        """
        if text is None or not str(text).strip():
            return cls.INVALID
        s = str(text).strip()

        sep = next((c for c in _SEPARATORS if c in s), None)
        if sep is None:
            as_int = _parse_int(s)
            if as_int is not None:
                return cls(as_int, 1)
            return cls._parse_decimal_lossy(s)

        num_text, den_text = s.split(sep, 1)
        num = _parse_int(num_text)
        den = _parse_int(den_text)
        if num is None or den is None:
            return cls.INVALID
        return cls.reduce(num, den)

    @classmethod
    def _parse_decimal_lossy(cls, text: str) -> "ExactFraction":
        # Imprecise by nature (29.97 is not 30000/1001); only for odd inputs.
        if not text.isascii():
            return cls.INVALID
        try:
            value = float(text)
        except ValueError:
            return cls.INVALID
        scaled = value * DECIMAL_FALLBACK_SCALE
        if not math.isfinite(scaled):
            return cls.INVALID
        return cls.reduce(round(scaled), DECIMAL_FALLBACK_SCALE)

    # ---- queries --------------------------------------------------------------
    @property
    def is_valid(self) -> bool:
        return self.denominator != 0

    def to_double(self) -> float:
        if not self.is_valid:
            return math.nan
        return self.numerator / self.denominator

    def or_else(self, fallback: "ExactFraction") -> "ExactFraction":
        return self if self.is_valid else fallback

    # ---- arithmetic -----------------------------------------------------------
    def multiply(self, other: "ExactFraction") -> "ExactFraction":
        if not (self.is_valid and other.is_valid):
            return ExactFraction.INVALID
        return ExactFraction.reduce(self.numerator * other.numerator, self.denominator * other.denominator)

    def divide(self, other: "ExactFraction") -> "ExactFraction":
        if not (self.is_valid and other.is_valid):
            return ExactFraction.INVALID
        # x / 0 is undefined: surface it as INVALID rather than raising.
        if other.numerator == 0:
            return ExactFraction.INVALID
        return ExactFraction.reduce(self.numerator * other.denominator, self.denominator * other.numerator)

    def __mul__(self, other: object) -> "ExactFraction":
        if not isinstance(other, ExactFraction):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: object) -> "ExactFraction":
        if not isinstance(other, ExactFraction):
            return NotImplemented
        return self.divide(other)

    # ---- value semantics ------------------------------------------------------
    def as_key(self) -> Tuple[int, int]:
        r = ExactFraction.reduce(self.numerator, self.denominator)
        return (r.numerator, r.denominator)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExactFraction):
            return NotImplemented
        return self.as_key() == other.as_key()

    def __hash__(self) -> int:
        return hash(self.as_key())

    def __str__(self) -> str:
        if not self.is_valid:
            return "0/0"
        return f"{self.numerator}/{self.denominator}"


# Canonical singletons handed out by reduce() / parse().
ExactFraction.ZERO = ExactFraction(0, 1)
ExactFraction.INVALID = ExactFraction(0, 0)
