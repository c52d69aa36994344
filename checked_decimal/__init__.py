"""Checked 18-decimal fixed-point arithmetic for accounting."""

from checked_decimal.constants import (
    BPS_SCALER,
    HALF_WAD,
    PERCENT_SCALER,
    RPT_SCALER,
    SCALE,
    WAD,
)
from checked_decimal.errors import ArithmeticPanic, DecimalError, MathOverflow
from checked_decimal.math import Decimal, Rate, Ratio
from checked_decimal.types import Width

__version__ = "0.1.0"
__all__ = [
    # Types
    "Decimal",
    "Rate",
    "Ratio",
    "Width",
    # Errors
    "ArithmeticPanic",
    "DecimalError",
    "MathOverflow",
    # Constants
    "BPS_SCALER",
    "HALF_WAD",
    "PERCENT_SCALER",
    "RPT_SCALER",
    "SCALE",
    "WAD",
    "__version__",
]
