"""Tests for scale constants."""

from checked_decimal.constants import BPS_SCALER, HALF_WAD, PERCENT_SCALER, RPT_SCALER, SCALE, WAD


def test_wad_matches_scale():
    """WAD is 10^SCALE."""
    assert SCALE == 18
    assert WAD == 10**SCALE


def test_derived_scalers():
    """Half unit, percent, bps and rpt scalers."""
    assert HALF_WAD * 2 == WAD
    assert PERCENT_SCALER * 100 == WAD
    assert BPS_SCALER * 100 == PERCENT_SCALER
    assert BPS_SCALER == 10**14
    assert RPT_SCALER == 10**15
