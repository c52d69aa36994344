"""Checked-operation protocols and the unchecked operator layer.

Two tiers of arithmetic are available on every fixed-point type:

- Checked: ``try_add``, ``try_sub``, ``try_mul``, ``try_div``. These raise
  MathOverflow on overflow, underflow or division by zero and are what
  library code should use.
- Unchecked: ``+ - * /``. These call the checked method and turn any
  failure into ArithmeticPanic. Only use them where the operands are known
  to be in range (tests, provably bounded paths).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, TypeVar, runtime_checkable

import structlog

from checked_decimal.errors import ArithmeticPanic, DecimalError

logger = structlog.get_logger()

T = TypeVar("T")


@runtime_checkable
class TryAdd(Protocol):
    """Addition that raises MathOverflow instead of wrapping."""

    def try_add(self, rhs: Any) -> Any: ...


@runtime_checkable
class TrySub(Protocol):
    """Subtraction that raises MathOverflow on underflow."""

    def try_sub(self, rhs: Any) -> Any: ...


@runtime_checkable
class TryMul(Protocol):
    """Multiplication that raises MathOverflow instead of wrapping."""

    def try_mul(self, rhs: Any) -> Any: ...


@runtime_checkable
class TryDiv(Protocol):
    """Division that raises MathOverflow on overflow or division by zero."""

    def try_div(self, rhs: Any) -> Any: ...


def unchecked(op: str, fn: Callable[[], T], **context: Any) -> T:
    """Run a checked computation, aborting with ArithmeticPanic on failure.

    Args:
        op: Operation name for the log event
        fn: Zero-argument callable performing the checked computation
        **context: Extra fields logged on failure

    Returns:
        Whatever fn returns

    Raises:
        ArithmeticPanic: If fn raised a DecimalError
    """
    try:
        return fn()
    except DecimalError as err:
        logger.error("unchecked_arithmetic_failed", op=op, error=str(err), **context)
        raise ArithmeticPanic(f"{op} failed: {err}") from err


class UncheckedOpsMixin:
    """Infix operators delegating to the try_* methods.

    Unsupported operand types raise TypeError from the try_* method itself.
    """

    __slots__ = ()

    def __add__(self, rhs: Any) -> Any:
        return unchecked("add", lambda: self.try_add(rhs), lhs=repr(self), rhs=repr(rhs))  # type: ignore[attr-defined]

    def __sub__(self, rhs: Any) -> Any:
        return unchecked("sub", lambda: self.try_sub(rhs), lhs=repr(self), rhs=repr(rhs))  # type: ignore[attr-defined]

    def __mul__(self, rhs: Any) -> Any:
        return unchecked("mul", lambda: self.try_mul(rhs), lhs=repr(self), rhs=repr(rhs))  # type: ignore[attr-defined]

    def __truediv__(self, rhs: Any) -> Any:
        return unchecked("div", lambda: self.try_div(rhs), lhs=repr(self), rhs=repr(rhs))  # type: ignore[attr-defined]
