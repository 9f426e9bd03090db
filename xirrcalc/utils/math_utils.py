"""Numeric helpers shared by the XIRR solvers."""

import math
from decimal import Context, Decimal, ROUND_HALF_UP


def round_float(value: float, places: int) -> float:
    """
    Round half away from zero to ``places`` decimals.

    Works on the shortest decimal representation of ``value`` so that
    ``round_float(2.675, 2) == 2.68``. Non-finite input raises
    ``decimal.InvalidOperation``.
    """
    quantum = Decimal(1).scaleb(-places)
    # wide enough for any finite float
    context = Context(prec=330 + places)
    return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP, context=context))


def power_of(base: float, period) -> float:
    """
    Raise ``base`` to a rational period.

    A negative base uses ``|base| ** p * (-1) ** numerator`` so the sign
    follows the integer numerator of the period.
    """
    if base < 0:
        sign = -1.0 if period.numerator % 2 else 1.0
        return math.pow(-base, period.to_float()) * sign
    return math.pow(base, period.to_float())


def discounted_value(amount: float, period, rate: float) -> float:
    """Single XNPV term: amount / (1 + rate) ** period."""
    return amount / power_of(1.0 + rate, period)


def discounted_derivative(amount: float, period, rate: float) -> float:
    """Derivative of ``discounted_value`` with respect to rate."""
    return (
        -amount
        * period.to_float()
        * power_of(1.0 + rate, period.negative())
        * math.pow(1.0 + rate, -1)
    )


def sign(value: float) -> int:
    """Return -1, 0 or 1 according to the sign of value."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0
