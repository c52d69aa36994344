"""Integer ratio for scaling a 64-bit amount by a simple fraction."""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from checked_decimal.errors import ArithmeticPanic
from checked_decimal.math.uint import U64, U128
from checked_decimal.types import Width, validate_uint

__all__ = ["Ratio"]

logger = structlog.get_logger()


@dataclass(frozen=True)
class Ratio:
    """numerator / denominator, both 64-bit.

    Not a fixed-point number. A zero denominator is accepted here and only
    fails when mul() is called.

    Attributes:
        numerator: 64-bit unsigned numerator
        denominator: 64-bit unsigned denominator
    """

    numerator: int
    denominator: int

    def __post_init__(self) -> None:
        validate_uint(self.numerator, Width.U64)
        validate_uint(self.denominator, Width.U64)

    def mul(self, amount: int) -> int:
        """Return floor(numerator * amount / denominator).

        The product is formed at 128 bits; (2^64 - 1)^2 fits, so only the
        division and the narrowing back to 64 bits can fail.

        Raises:
            ArithmeticPanic: If denominator is zero or the result exceeds 64 bits
        """
        validate_uint(amount, Width.U64)
        product = U128.from_int(self.numerator).checked_mul(U128.from_int(amount))
        if product is None:
            logger.error("ratio_mul_failed", ratio=repr(self), amount=amount, reason="u128_overflow")
            raise ArithmeticPanic(f"{self!r}.mul({amount}): product exceeds 128 bits")
        quotient = product.checked_div(U128.from_int(self.denominator))
        if quotient is None:
            logger.error("ratio_mul_failed", ratio=repr(self), amount=amount, reason="zero_denominator")
            raise ArithmeticPanic(f"{self!r}.mul({amount}): division by zero")
        result = quotient.narrow(U64)
        if result is None:
            logger.error("ratio_mul_failed", ratio=repr(self), amount=amount, reason="u64_overflow")
            raise ArithmeticPanic(f"{self!r}.mul({amount}) = {quotient} exceeds 64 bits")
        return int(result)
