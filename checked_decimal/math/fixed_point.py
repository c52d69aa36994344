"""Shared base for 18-decimal fixed-point types.

All values are stored as unsigned integers scaled by 10^18.
Example: 1.5 is stored as 1_500_000_000_000_000_000

Subclasses pick the internal width (UINT) and the native widths their
constructors accept. Everything else (conversions, rounding, display and
same-type arithmetic) is implemented here once.
"""

from __future__ import annotations

from typing import Any, ClassVar, TypeVar

from checked_decimal.constants import BPS_SCALER, HALF_WAD, PERCENT_SCALER, SCALE, WAD
from checked_decimal.errors import MathOverflow
from checked_decimal.math.ops import UncheckedOpsMixin, unchecked
from checked_decimal.math.uint import FixedUInt
from checked_decimal.types import Width, narrow, validate_uint

__all__ = ["FixedPoint", "format_scaled"]

F = TypeVar("F", bound="FixedPoint")
U = TypeVar("U", bound=FixedUInt)


def _ok(value: U | None, message: str) -> U:
    if value is None:
        raise MathOverflow(message)
    return value


def format_scaled(raw: int) -> str:
    """Render a raw scaled integer with exactly 18 fractional digits.

    Examples:
        format_scaled(1) == "0.000000000000000001"
        format_scaled(10**18) == "1.000000000000000000"
    """
    digits = str(raw)
    if len(digits) <= SCALE:
        return "0." + digits.zfill(SCALE)
    return digits[:-SCALE] + "." + digits[-SCALE:]


class FixedPoint(UncheckedOpsMixin):
    """Unsigned fixed-point value, precise to 18 digits."""

    UINT: ClassVar[type[FixedUInt]]
    # Own width, used as the default for to_scaled_val
    WIDTH: ClassVar[Width]
    # Native widths accepted by the constructors
    PERCENT_WIDTH: ClassVar[Width]
    BPS_WIDTH: ClassVar[Width]
    SCALED_WIDTH: ClassVar[Width]
    INT_WIDTH: ClassVar[Width]

    __slots__ = ("_raw",)
    _raw: FixedUInt

    def __init__(self, raw: FixedUInt) -> None:
        """Wrap a raw value already scaled by 10^18."""
        if type(raw) is not self.UINT:
            raise TypeError(f"{type(self).__name__} requires {self.UINT.__name__}, got {type(raw).__name__}")
        self._raw = raw

    @property
    def raw(self) -> FixedUInt:
        """The underlying scaled integer."""
        return self._raw

    # --- Construction ---

    @classmethod
    def _wad(cls) -> FixedUInt:
        return cls.UINT.from_int(WAD)

    @classmethod
    def _half_wad(cls) -> FixedUInt:
        return cls.UINT.from_int(HALF_WAD)

    @classmethod
    def one(cls: type[F]) -> F:
        return cls(cls._wad())

    @classmethod
    def zero(cls: type[F]) -> F:
        return cls(cls.UINT.zero())

    @classmethod
    def _from_scaled_product(cls: type[F], op: str, value: int, scaler: int) -> F:
        def compute() -> F:
            product = cls.UINT.from_int(value).checked_mul(cls.UINT.from_int(scaler))
            return cls(_ok(product, f"{cls.__name__}.{op}({value}) overflows"))

        return unchecked(op, compute, value=value)

    @classmethod
    def from_int(cls: type[F], value: int) -> F:
        """Create from a whole number (scaled by 10^18).

        Raises:
            ValueError: If value is outside INT_WIDTH
            ArithmeticPanic: If the scaled value does not fit
        """
        validate_uint(value, cls.INT_WIDTH)
        return cls._from_scaled_product("from_int", value, WAD)

    @classmethod
    def from_percent(cls: type[F], percent: int) -> F:
        """Create from a percent value: from_percent(3) is 0.03.

        Raises:
            ValueError: If percent is outside PERCENT_WIDTH
            ArithmeticPanic: If the scaled value does not fit
        """
        validate_uint(percent, cls.PERCENT_WIDTH)
        return cls._from_scaled_product("from_percent", percent, PERCENT_SCALER)

    @classmethod
    def from_bps(cls: type[F], bps: int) -> F:
        """Create from basis points: from_bps(25) is 0.0025.

        Raises:
            ValueError: If bps is outside BPS_WIDTH
            ArithmeticPanic: If the scaled value does not fit
        """
        validate_uint(bps, cls.BPS_WIDTH)
        return cls._from_scaled_product("from_bps", bps, BPS_SCALER)

    @classmethod
    def from_scaled_val(cls: type[F], scaled_val: int) -> F:
        """Create from a raw value already expressed in units of 10^-18 (no scaling applied)."""
        validate_uint(scaled_val, cls.SCALED_WIDTH)
        return cls(cls.UINT.from_int(scaled_val))

    # --- Conversion ---

    def _scale_down(self, scaler: int) -> FixedUInt:
        return _ok(self._raw.checked_div(self.UINT.from_int(scaler)), "scaler is zero")

    def to_scaled_val(self, width: Width | None = None) -> int:
        """Return the raw scaled value if it fits width (default: own width).

        Raises:
            MathOverflow: If the value does not fit width
        """
        return narrow(int(self._raw), width or self.WIDTH)

    def to_percent(self, width: Width = Width.U128) -> int:
        """Return the value in whole percent, truncated.

        Raises:
            MathOverflow: If the result does not fit width
        """
        return narrow(int(self._scale_down(PERCENT_SCALER)), width)

    def to_bps(self, width: Width = Width.U128) -> int:
        """Return the value in whole basis points, truncated.

        Raises:
            MathOverflow: If the result does not fit width
        """
        return narrow(int(self._scale_down(BPS_SCALER)), width)

    def try_round(self, width: Width = Width.U64) -> int:
        """Round half up to a whole number.

        Raises:
            MathOverflow: If adding the half unit overflows, or the result does not fit width
        """
        shifted = _ok(self._raw.checked_add(self._half_wad()), f"{self!r} round overflows")
        rounded = _ok(shifted.checked_div(self._wad()), f"{self!r} round overflows")
        return narrow(int(rounded), width)

    def try_ceil(self, width: Width = Width.U64) -> int:
        """Round up to a whole number.

        Raises:
            MathOverflow: If adding the ceiling offset overflows, or the result does not fit width
        """
        offset = _ok(self._wad().checked_sub(self.UINT.from_int(1)), "ceil offset underflows")
        shifted = _ok(offset.checked_add(self._raw), f"{self!r} ceil overflows")
        ceiled = _ok(shifted.checked_div(self._wad()), f"{self!r} ceil overflows")
        return narrow(int(ceiled), width)

    def try_floor(self, width: Width = Width.U64) -> int:
        """Truncate to a whole number.

        Raises:
            MathOverflow: If the result does not fit width
        """
        floored = _ok(self._raw.checked_div(self._wad()), f"{self!r} floor overflows")
        return narrow(int(floored), width)

    # --- Checked arithmetic ---

    def _same_type(self: F, rhs: Any, op: str) -> F:
        if type(rhs) is not type(self):
            raise TypeError(f"Cannot {op} {type(self).__name__} and {type(rhs).__name__}")
        return rhs

    def _uint_operand(self, rhs: int) -> FixedUInt:
        # Plain integers must fit the internal width
        return self.UINT.from_int(rhs)

    def try_add(self: F, rhs: F) -> F:
        """Add two values.

        Raises:
            MathOverflow: On overflow
        """
        rhs = self._same_type(rhs, "add")
        return type(self)(_ok(self._raw.checked_add(rhs._raw), f"{self!r} + {rhs!r} overflows"))

    def try_sub(self: F, rhs: F) -> F:
        """Subtract rhs from self.

        Raises:
            MathOverflow: If rhs > self
        """
        rhs = self._same_type(rhs, "subtract")
        return type(self)(_ok(self._raw.checked_sub(rhs._raw), f"{self!r} - {rhs!r} underflows"))

    def try_mul(self: F, rhs: Any) -> F:
        """Multiply by a plain integer or by a value of the same type.

        Integer: raw * n, scale unchanged.
        Same type: (raw1 * raw2) / 10^18. The product raw1 * raw2 must fit
        the internal width, which bounds x * y well below the type's range.

        Raises:
            MathOverflow: On overflow
            TypeError: For any other operand type
        """
        if isinstance(rhs, int) and not isinstance(rhs, bool):
            product = self._raw.checked_mul(self._uint_operand(rhs))
            return type(self)(_ok(product, f"{self!r} * {rhs} overflows"))
        rhs = self._same_type(rhs, "multiply")
        product = _ok(self._raw.checked_mul(rhs._raw), f"{self!r} * {rhs!r} overflows")
        return type(self)(_ok(product.checked_div(self._wad()), f"{self!r} * {rhs!r} overflows"))

    def try_div(self: F, rhs: Any) -> F:
        """Divide by a plain integer or by a value of the same type.

        Integer: raw / n, scale unchanged.
        Same type: (raw1 * 10^18) / raw2, so the quotient stays on the 10^-18 scale.

        Raises:
            MathOverflow: On overflow or division by zero
            TypeError: For any other operand type
        """
        if isinstance(rhs, int) and not isinstance(rhs, bool):
            quotient = self._raw.checked_div(self._uint_operand(rhs))
            return type(self)(_ok(quotient, f"{self!r} / {rhs} divides by zero"))
        rhs = self._same_type(rhs, "divide")
        scaled = _ok(self._raw.checked_mul(self._wad()), f"{self!r} / {rhs!r} overflows")
        return type(self)(_ok(scaled.checked_div(rhs._raw), f"{self!r} / {rhs!r} divides by zero"))

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._raw == other._raw  # type: ignore[attr-defined]

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._raw < other._raw  # type: ignore[attr-defined]

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._raw <= other._raw  # type: ignore[attr-defined]

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._raw > other._raw  # type: ignore[attr-defined]

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._raw >= other._raw  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._raw))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self._raw)})"

    def __str__(self) -> str:
        return format_scaled(int(self._raw))
