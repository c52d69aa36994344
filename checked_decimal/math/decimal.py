"""Decimal: 192-bit fixed-point value for token amounts and large products.

Range is [0, 2^192 / 10^18), about 6.3e39. Decimal * Decimal computes the
raw product at 192 bits before rescaling, so it needs x * y < 2^192 / 10^36
(about 6.277e21); Decimal / Decimal needs x < 6.277e21.
"""

from __future__ import annotations

from typing import Any, ClassVar

from checked_decimal.math.fixed_point import FixedPoint
from checked_decimal.math.rate import Rate
from checked_decimal.math.uint import U192, FixedUInt
from checked_decimal.types import Width

__all__ = ["Decimal"]


class Decimal(FixedPoint):
    """Large fixed-point value stored in 192 bits, precise to 18 digits."""

    UINT: ClassVar[type[FixedUInt]] = U192
    WIDTH: ClassVar[Width] = Width.U192
    PERCENT_WIDTH: ClassVar[Width] = Width.U192
    BPS_WIDTH: ClassVar[Width] = Width.U192
    SCALED_WIDTH: ClassVar[Width] = Width.U192
    # (2^128 - 1) * 10^18 < 2^192, so from_int never overflows
    INT_WIDTH: ClassVar[Width] = Width.U128

    __slots__ = ()

    @classmethod
    def from_rate(cls, rate: Rate) -> Decimal:
        """Widen a Rate; the scale is the same, so the raw value carries over."""
        if not isinstance(rate, Rate):
            raise TypeError(f"Decimal.from_rate requires Rate, got {type(rate).__name__}")
        return cls(rate.raw.widen(U192))

    def try_mul(self, rhs: Any) -> Decimal:
        """Multiply by an integer, a Decimal, or a Rate (widened first)."""
        if isinstance(rhs, Rate):
            rhs = Decimal.from_rate(rhs)
        return super().try_mul(rhs)

    def try_div(self, rhs: Any) -> Decimal:
        """Divide by an integer, a Decimal, or a Rate (widened first)."""
        if isinstance(rhs, Rate):
            rhs = Decimal.from_rate(rhs)
        return super().try_div(rhs)
