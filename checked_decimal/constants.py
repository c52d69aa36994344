"""Fixed-point scale and integer width constants.

All fixed-point values in this package are unsigned integers scaled by 10^18.
"""

# Number of fractional decimal digits
SCALE = 18

# Whole unit (1.0) and half unit (0.5, for round-half-up)
WAD = 10**SCALE
HALF_WAD = WAD // 2

# 1% and 1 bp (100 bp = 1 percent)
PERCENT_SCALER = 10**16
BPS_SCALER = PERCENT_SCALER // 100

# Rate-per-time scaler, used by hosts that accrue rates over slots
RPT_SCALER = 10**15

# Native unsigned integer bounds
U8_MAX = 2**8 - 1
U16_MAX = 2**16 - 1
U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1
U192_MAX = 2**192 - 1
