"""Rate: 128-bit fixed-point value for percentages and rate-like factors.

Range is [0, 2^128 / 10^18), about 3.4e20. Rate * Rate computes the raw
product at 128 bits before rescaling, so it needs x * y < 2^128 / 10^36
(about 340.28); Rate / Rate needs x < 340.28. Use Decimal for anything
larger.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

import structlog

from checked_decimal.constants import BPS_SCALER
from checked_decimal.errors import MathOverflow
from checked_decimal.math.fixed_point import FixedPoint
from checked_decimal.math.uint import U128, FixedUInt
from checked_decimal.types import Width, validate_uint

if TYPE_CHECKING:
    from checked_decimal.math.decimal import Decimal

__all__ = ["Rate"]

logger = structlog.get_logger()


class Rate(FixedPoint):
    """Small fixed-point value stored in 128 bits, precise to 18 digits."""

    UINT: ClassVar[type[FixedUInt]] = U128
    WIDTH: ClassVar[Width] = Width.U128
    PERCENT_WIDTH: ClassVar[Width] = Width.U8
    BPS_WIDTH: ClassVar[Width] = Width.U16
    SCALED_WIDTH: ClassVar[Width] = Width.U128
    INT_WIDTH: ClassVar[Width] = Width.U64

    __slots__ = ()

    @classmethod
    def half(cls) -> Rate:
        """0.5"""
        return cls(cls._half_wad())

    @classmethod
    def from_bps_u64(cls, bps: int) -> Rate:
        """Create from basis points given as a 64-bit value.

        2^64 - 1 bps scaled by 10^14 still fits in 128 bits, so this cannot overflow.
        """
        validate_uint(bps, Width.U64)
        return cls._from_scaled_product("from_bps_u64", bps, BPS_SCALER)

    @classmethod
    def from_decimal(cls, decimal: Decimal) -> Rate:
        """Narrow a Decimal into a Rate.

        Raises:
            TypeError: If decimal is not a Decimal
            MathOverflow: If the Decimal's raw value does not fit in 128 bits
        """
        from checked_decimal.math.decimal import Decimal

        if not isinstance(decimal, Decimal):
            raise TypeError(f"Rate.from_decimal requires Decimal, got {type(decimal).__name__}")
        raw = decimal.raw.narrow(U128)
        if raw is None:
            raise MathOverflow(f"{decimal!r} does not fit in Rate")
        return cls(raw)

    def try_pow(self, exp: int) -> Rate:
        """Compute self^exp by repeated squaring.

        Each step is a fixed-point multiply, so intermediate results are
        truncated to 18 digits. The base is squared once per exponent bit,
        including after the last one, and any overflow fails the whole call.
        O(log exp) multiplications.

        Args:
            exp: Non-negative 64-bit exponent

        Raises:
            MathOverflow: If any intermediate multiply overflows
        """
        validate_uint(exp, Width.U64)
        base = self
        result = base if exp % 2 else Rate.one()
        try:
            while exp > 0:
                exp //= 2
                base = base.try_mul(base)
                if exp % 2:
                    result = result.try_mul(base)
        except MathOverflow:
            logger.debug("rate_pow_overflow", base=repr(self), remaining_exp=exp)
            raise
        return result
