"""Fixed-point and wide-integer arithmetic.

- Rate: 18-decimal fixed point in 128 bits
- Decimal: 18-decimal fixed point in 192 bits
- Ratio: integer fraction applied to a 64-bit amount
- U64 / U128 / U192: word-array unsigned integers with checked arithmetic
"""

from checked_decimal.math.decimal import Decimal
from checked_decimal.math.ops import TryAdd, TryDiv, TryMul, TrySub
from checked_decimal.math.rate import Rate
from checked_decimal.math.ratio import Ratio
from checked_decimal.math.uint import U64, U128, U192, FixedUInt

__all__ = [
    "Decimal",
    "FixedUInt",
    "Rate",
    "Ratio",
    "TryAdd",
    "TryDiv",
    "TryMul",
    "TrySub",
    "U64",
    "U128",
    "U192",
]
