"""Error classes for checked fixed-point arithmetic.

Checked operations raise MathOverflow. The operator layer and the
constructors that have no checked form raise ArithmeticPanic instead.
"""


class DecimalError(ArithmeticError):
    """Base error for checked fixed-point operations."""

    pass


class MathOverflow(DecimalError):
    """Overflow, underflow, division by zero, or a value that does not fit the target width."""

    pass


class ArithmeticPanic(RuntimeError):
    """An unchecked operation failed.

    Not a DecimalError subclass: code handling checked errors must not
    catch these by accident. The underlying MathOverflow is chained as
    ``__cause__`` where there is one.
    """

    pass
