"""Fixed-width unsigned integers built from 64-bit words.

Each value is a tuple of 64-bit words, least significant first. Arithmetic
propagates carries and borrows word by word and detects overflow explicitly
instead of relying on Python's unbounded ints, so a result is either exact
at its width or rejected.

Usage pattern:
    from checked_decimal.math.uint import U192

    a = U192.from_int(10**40)
    b = a.checked_mul(a)      # None: 10^80 does not fit in 192 bits
    c = a.checked_add(a)      # U192(2 * 10**40)

The ``checked_*`` methods return None on overflow, underflow or division by
zero; callers decide which error that maps to.
"""

from __future__ import annotations

from typing import ClassVar, TypeVar

from checked_decimal.errors import MathOverflow

__all__ = ["FixedUInt", "U64", "U128", "U192", "WORD_BITS", "WORD_MASK"]

WORD_BITS = 64
WORD_MASK = (1 << WORD_BITS) - 1

T = TypeVar("T", bound="FixedUInt")


class FixedUInt:
    """Unsigned integer of WORDS x 64 bits.

    Subclasses only set WORDS. Instances are immutable and hashable.
    """

    WORDS: ClassVar[int] = 0

    __slots__ = ("_words",)
    _words: tuple[int, ...]

    def __init__(self, words: tuple[int, ...]) -> None:
        """Create from little-endian 64-bit words.

        Raises:
            ValueError: If the word count is wrong or a word is out of range
        """
        if len(words) != self.WORDS:
            raise ValueError(f"{type(self).__name__} needs {self.WORDS} words, got {len(words)}")
        for word in words:
            if not 0 <= word <= WORD_MASK:
                raise ValueError(f"Word out of range: {word}")
        self._words = tuple(words)

    # --- Construction ---

    @classmethod
    def bits(cls) -> int:
        return cls.WORDS * WORD_BITS

    @classmethod
    def zero(cls: type[T]) -> T:
        return cls((0,) * cls.WORDS)

    @classmethod
    def max_value(cls: type[T]) -> T:
        return cls((WORD_MASK,) * cls.WORDS)

    @classmethod
    def from_int(cls: type[T], value: int) -> T:
        """Split a Python int into words.

        Raises:
            TypeError: If value is not an int
            ValueError: If value is negative
            MathOverflow: If value does not fit the width
        """
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"{cls.__name__} requires int, got {type(value).__name__}")
        if value < 0:
            raise ValueError(f"{cls.__name__} cannot be negative: {value}")
        if value >> cls.bits():
            raise MathOverflow(f"{value} does not fit in {cls.__name__}")
        return cls(tuple((value >> (WORD_BITS * i)) & WORD_MASK for i in range(cls.WORDS)))

    @property
    def words(self) -> tuple[int, ...]:
        """Little-endian 64-bit words."""
        return self._words

    def __int__(self) -> int:
        result = 0
        for word in reversed(self._words):
            result = (result << WORD_BITS) | word
        return result

    __index__ = __int__

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"

    def __str__(self) -> str:
        return str(int(self))

    def __bool__(self) -> bool:
        return any(self._words)

    def __hash__(self) -> int:
        return hash((type(self), self._words))

    # --- Comparison operations ---

    def _cmp(self, other: FixedUInt) -> int:
        return _cmp_words(self._words, other._words)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._words == other._words  # type: ignore[attr-defined]

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._cmp(other) < 0  # type: ignore[arg-type]

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._cmp(other) <= 0  # type: ignore[arg-type]

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._cmp(other) > 0  # type: ignore[arg-type]

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._cmp(other) >= 0  # type: ignore[arg-type]

    # --- Width conversion ---

    def widen(self, cls: type[T]) -> T:
        """Re-base into a type at least as wide as this one."""
        if cls.WORDS < self.WORDS:
            raise TypeError(f"Cannot widen {type(self).__name__} into {cls.__name__}")
        return cls(self._words + (0,) * (cls.WORDS - self.WORDS))

    def narrow(self, cls: type[T]) -> T | None:
        """Re-base into a narrower type, or None if the high words are not zero."""
        if any(self._words[cls.WORDS :]):
            return None
        return cls(self._words[: cls.WORDS] + (0,) * max(0, cls.WORDS - self.WORDS))

    # --- Checked arithmetic ---

    def _check_operand(self, other: FixedUInt) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"{type(self).__name__} operand must be {type(self).__name__}, "
                f"got {type(other).__name__}"
            )

    def checked_add(self: T, other: T) -> T | None:
        """Add, returning None on overflow."""
        self._check_operand(other)
        out = []
        carry = 0
        for a, b in zip(self._words, other._words):
            total = a + b + carry
            out.append(total & WORD_MASK)
            carry = total >> WORD_BITS
        if carry:
            return None
        return type(self)(tuple(out))

    def checked_sub(self: T, other: T) -> T | None:
        """Subtract, returning None on underflow."""
        self._check_operand(other)
        out, borrow = _sub_words(self._words, other._words)
        if borrow:
            return None
        return type(self)(out)

    def checked_mul(self: T, other: T) -> T | None:
        """Multiply, returning None if the product needs more than WORDS words."""
        self._check_operand(other)
        n = self.WORDS
        acc = [0] * (2 * n)
        for i, a in enumerate(self._words):
            if a == 0:
                continue
            carry = 0
            for j, b in enumerate(other._words):
                # a * b < 2^128; split into low and high words
                total = acc[i + j] + a * b + carry
                acc[i + j] = total & WORD_MASK
                carry = total >> WORD_BITS
            k = i + n
            while carry:
                total = acc[k] + carry
                acc[k] = total & WORD_MASK
                carry = total >> WORD_BITS
                k += 1
        if any(acc[n:]):
            return None
        return type(self)(tuple(acc[:n]))

    def checked_div(self: T, other: T) -> T | None:
        """Floor-divide, returning None on division by zero."""
        self._check_operand(other)
        if not other:
            return None
        if not any(other._words[1:]):
            return self._div_word(other._words[0])
        return self._div_long(other)

    def _div_word(self: T, divisor: int) -> T:
        # Short division: each step divides a two-word remainder by one word
        out = [0] * self.WORDS
        rem = 0
        for i in reversed(range(self.WORDS)):
            current = (rem << WORD_BITS) | self._words[i]
            out[i] = current // divisor
            rem = current % divisor
        return type(self)(tuple(out))

    def _div_long(self: T, other: T) -> T:
        # Shift-subtract long division, one bit at a time from the top
        quotient = [0] * self.WORDS
        rem = (0,) * self.WORDS
        for bit in reversed(range(self.bits())):
            rem, top = _shl1_words(rem, self._bit(bit))
            # A bit shifted out of the top means rem >= 2^bits > other
            if top or _cmp_words(rem, other._words) >= 0:
                rem, _ = _sub_words(rem, other._words)
                quotient[bit // WORD_BITS] |= 1 << (bit % WORD_BITS)
        return type(self)(tuple(quotient))

    def _bit(self, index: int) -> int:
        return (self._words[index // WORD_BITS] >> (index % WORD_BITS)) & 1


def _cmp_words(a: tuple[int, ...], b: tuple[int, ...]) -> int:
    for x, y in zip(reversed(a), reversed(b)):
        if x != y:
            return -1 if x < y else 1
    return 0


def _sub_words(a: tuple[int, ...], b: tuple[int, ...]) -> tuple[tuple[int, ...], int]:
    """Subtract word arrays modulo 2^bits, returning (words, final borrow)."""
    out = []
    borrow = 0
    for x, y in zip(a, b):
        diff = x - y - borrow
        if diff < 0:
            diff += 1 << WORD_BITS
            borrow = 1
        else:
            borrow = 0
        out.append(diff)
    return tuple(out), borrow


def _shl1_words(words: tuple[int, ...], low_bit: int) -> tuple[tuple[int, ...], int]:
    """Shift left by one bit, returning (words, bit shifted out of the top)."""
    out = []
    carry = low_bit
    for word in words:
        out.append(((word << 1) & WORD_MASK) | carry)
        carry = word >> (WORD_BITS - 1)
    return tuple(out), carry


class U64(FixedUInt):
    """64-bit unsigned integer (1 word)."""

    WORDS: ClassVar[int] = 1
    __slots__ = ()


class U128(FixedUInt):
    """128-bit unsigned integer (2 words)."""

    WORDS: ClassVar[int] = 2
    __slots__ = ()


class U192(FixedUInt):
    """192-bit unsigned integer (3 words)."""

    WORDS: ClassVar[int] = 3
    __slots__ = ()
