"""Native unsigned integer widths.

Integer arguments crossing the public boundary are checked against the
width they are declared with. Constructors validate through pydantic
(``validate_uint()``); results are narrowed with ``narrow()``.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated

import structlog
from pydantic import AfterValidator, Strict, TypeAdapter

from checked_decimal.constants import U8_MAX, U16_MAX, U32_MAX, U64_MAX, U128_MAX, U192_MAX
from checked_decimal.errors import MathOverflow

logger = structlog.get_logger()


def _in_range(limit: int) -> AfterValidator:
    def check(value: int) -> int:
        if not 0 <= value <= limit:
            raise ValueError(f"{value} is outside [0, {limit}]")
        return value

    return AfterValidator(check)


# Strict: bool, float and numeric strings are rejected rather than coerced
UInt8 = Annotated[int, Strict(), _in_range(U8_MAX)]
UInt16 = Annotated[int, Strict(), _in_range(U16_MAX)]
UInt32 = Annotated[int, Strict(), _in_range(U32_MAX)]
UInt64 = Annotated[int, Strict(), _in_range(U64_MAX)]
UInt128 = Annotated[int, Strict(), _in_range(U128_MAX)]
UInt192 = Annotated[int, Strict(), _in_range(U192_MAX)]


class Width(Enum):
    """Target width of a narrowing conversion."""

    U8 = 8
    U16 = 16
    U32 = 32
    U64 = 64
    U128 = 128
    U192 = 192

    @property
    def bits(self) -> int:
        return self.value

    @property
    def max(self) -> int:
        """Largest value representable at this width."""
        return (1 << self.value) - 1


def narrow(value: int, width: Width) -> int:
    """Return value unchanged if it fits width.

    Args:
        value: Non-negative integer to convert
        width: Target width

    Returns:
        value

    Raises:
        MathOverflow: If value exceeds width.max
    """
    if value > width.max:
        logger.debug("narrowing_conversion_failed", value=value, width=width.name)
        raise MathOverflow(f"{value} does not fit in {width.name}")
    return value


_ADAPTERS: dict[Width, TypeAdapter[int]] = {
    Width.U8: TypeAdapter(UInt8),
    Width.U16: TypeAdapter(UInt16),
    Width.U32: TypeAdapter(UInt32),
    Width.U64: TypeAdapter(UInt64),
    Width.U128: TypeAdapter(UInt128),
    Width.U192: TypeAdapter(UInt192),
}


def validate_uint(value: int, width: Width) -> int:
    """Validate a native integer argument against its declared width.

    Raises:
        pydantic.ValidationError: If value is not an int, is negative, or exceeds width.max
            (ValidationError is a ValueError)
    """
    return _ADAPTERS[width].validate_python(value)
