"""Tests for word-array unsigned integers.

Random operand pairs are checked against Python's arbitrary-precision int.
"""

import random

import pytest

from checked_decimal.errors import MathOverflow
from checked_decimal.math.uint import U64, U128, U192, WORD_MASK

ITERATIONS = 300


def _operand(rng: random.Random, bits: int) -> int:
    """Random value with a random bit length, so small and full-width values both occur."""
    return rng.getrandbits(rng.randint(0, bits))


class TestConstruction:
    """Tests for from_int and word layout."""

    def test_words_are_little_endian(self):
        """Low word first."""
        assert U128.from_int(1 << 64).words == (0, 1)
        assert U192.from_int(5).words == (5, 0, 0)

    def test_round_trip_int(self):
        """int(from_int(n)) == n."""
        for n in (0, 1, WORD_MASK, 1 << 64, 2**128 - 1):
            assert int(U128.from_int(n)) == n

    def test_max_value(self):
        """max_value() is all ones."""
        assert int(U192.max_value()) == 2**192 - 1
        assert int(U64.max_value()) == 2**64 - 1

    def test_negative_raises(self):
        """Negative values are rejected."""
        with pytest.raises(ValueError):
            U128.from_int(-1)

    def test_too_large_raises_overflow(self):
        """Values wider than the type raise MathOverflow."""
        with pytest.raises(MathOverflow):
            U128.from_int(2**128)
        with pytest.raises(MathOverflow):
            U64.from_int(2**64)

    def test_invalid_type_raises(self):
        """Only ints are accepted."""
        with pytest.raises(TypeError):
            U128.from_int("1")  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            U128.from_int(True)

    def test_wrong_word_count_raises(self):
        """The constructor checks the word count."""
        with pytest.raises(ValueError):
            U128((1, 2, 3))

    def test_word_out_of_range_raises(self):
        """Each word must fit in 64 bits."""
        with pytest.raises(ValueError):
            U128((1 << 64, 0))

    def test_str_and_repr(self):
        """str is the decimal value; repr names the type."""
        assert str(U192.from_int(12345)) == "12345"
        assert repr(U128.from_int(7)) == "U128(7)"


class TestComparison:
    """Tests for ordering, equality and hashing."""

    def test_ordering_across_words(self):
        """The high word dominates."""
        assert U128.from_int(1 << 64) > U128.from_int(WORD_MASK)
        assert U128.from_int(3) < U128.from_int(4)
        assert U128.from_int(4) <= U128.from_int(4)
        assert U128.from_int(4) >= U128.from_int(4)

    def test_equal_values_hash_equal(self):
        """Equal values hash the same."""
        assert hash(U192.from_int(99)) == hash(U192.from_int(99))

    def test_different_widths_are_not_equal(self):
        """Values of different widths never compare equal."""
        assert U128.from_int(1) != U192.from_int(1)

    def test_bool(self):
        """Only zero is falsy."""
        assert not U192.zero()
        assert U192.from_int(1 << 130)


class TestCheckedArithmetic:
    """Random operand pairs compared against Python int."""

    @pytest.mark.parametrize("cls", [U64, U128, U192])
    def test_add(self, cls, rng):
        """checked_add matches int addition, or is None past the width."""
        limit = 1 << cls.bits()
        for _ in range(ITERATIONS):
            a, b = _operand(rng, cls.bits()), _operand(rng, cls.bits())
            result = cls.from_int(a).checked_add(cls.from_int(b))
            if a + b < limit:
                assert result is not None and int(result) == a + b
            else:
                assert result is None

    @pytest.mark.parametrize("cls", [U64, U128, U192])
    def test_sub(self, cls, rng):
        """checked_sub matches int subtraction, or is None below zero."""
        for _ in range(ITERATIONS):
            a, b = _operand(rng, cls.bits()), _operand(rng, cls.bits())
            result = cls.from_int(a).checked_sub(cls.from_int(b))
            if a >= b:
                assert result is not None and int(result) == a - b
            else:
                assert result is None

    @pytest.mark.parametrize("cls", [U64, U128, U192])
    def test_mul(self, cls, rng):
        """checked_mul matches int multiplication, or is None past the width."""
        limit = 1 << cls.bits()
        for _ in range(ITERATIONS):
            a, b = _operand(rng, cls.bits()), _operand(rng, cls.bits())
            result = cls.from_int(a).checked_mul(cls.from_int(b))
            if a * b < limit:
                assert result is not None and int(result) == a * b
            else:
                assert result is None

    @pytest.mark.parametrize("cls", [U64, U128, U192])
    def test_div(self, cls, rng):
        """checked_div matches floor division, or is None for a zero divisor."""
        for _ in range(ITERATIONS):
            a, b = _operand(rng, cls.bits()), _operand(rng, cls.bits())
            result = cls.from_int(a).checked_div(cls.from_int(b))
            if b == 0:
                assert result is None
            else:
                assert result is not None and int(result) == a // b

    def test_add_carries_across_words(self):
        """A carry out of the low word lands in the next word."""
        result = U128.from_int(WORD_MASK).checked_add(U128.from_int(1))
        assert result is not None
        assert result.words == (0, 1)

    def test_sub_borrows_across_words(self):
        """A borrow from the high word clears it."""
        result = U128.from_int(1 << 64).checked_sub(U128.from_int(1))
        assert result is not None
        assert result.words == (WORD_MASK, 0)

    def test_max_plus_one_overflows(self):
        """max + 1 is None."""
        assert U192.max_value().checked_add(U192.from_int(1)) is None

    def test_zero_minus_one_underflows(self):
        """0 - 1 is None."""
        assert U192.zero().checked_sub(U192.from_int(1)) is None

    def test_mul_by_zero(self):
        """Anything times zero is zero."""
        assert U192.max_value().checked_mul(U192.zero()) == U192.zero()

    def test_div_by_multi_word_divisor_with_top_bit_set(self):
        """Long division handles a remainder whose top bit shifts out."""
        a = 2**192 - 1
        b = 2**191 + 12345
        result = U192.from_int(a).checked_div(U192.from_int(b))
        assert result is not None and int(result) == a // b

        a = 2**128 - 1
        b = 2**127 + 5
        result = U128.from_int(a).checked_div(U128.from_int(b))
        assert result is not None and int(result) == a // b

    def test_div_by_single_word(self):
        """Short division by 10^18."""
        a = 2**192 - 1
        result = U192.from_int(a).checked_div(U192.from_int(10**18))
        assert result is not None and int(result) == a // 10**18

    def test_mixed_widths_raise(self):
        """Operands must have the same width."""
        with pytest.raises(TypeError):
            U128.from_int(1).checked_add(U192.from_int(1))  # type: ignore[arg-type]


class TestWidthConversion:
    """Tests for widen and narrow."""

    def test_widen_keeps_value(self):
        """Widening pads with zero words."""
        value = U128.from_int(2**128 - 1).widen(U192)
        assert isinstance(value, U192)
        assert int(value) == 2**128 - 1

    def test_widen_into_narrower_raises(self):
        """widen() only goes up."""
        with pytest.raises(TypeError):
            U192.from_int(1).widen(U128)

    def test_narrow_fits(self):
        """Narrowing a small value succeeds."""
        value = U192.from_int(2**128 - 1).narrow(U128)
        assert value is not None and int(value) == 2**128 - 1

    def test_narrow_does_not_fit(self):
        """Narrowing a value above the target width is None."""
        assert U192.from_int(2**128).narrow(U128) is None
        assert U128.from_int(2**64).narrow(U64) is None
