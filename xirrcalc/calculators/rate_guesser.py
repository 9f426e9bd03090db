"""Seed rate heuristic for the XIRR solvers."""

from typing import Sequence

from ..models.errors import ComputationError
from ..utils.math_utils import round_float


def guess_rate(periods: Sequence, amounts: Sequence[float], precision: int) -> float:
    """
    Estimate a starting rate from the extreme cash flow magnitudes.

    guess = (1 + |max / min|) ** (1 / (n - 1)) - 1

    Args:
        periods: Distinct periods of the flow set
        amounts: Aggregated amounts of the flow set
        precision: Decimal places of the returned guess

    Returns:
        Rounded seed rate. Not guaranteed to bracket the root.
    """
    if len(periods) < 2:
        raise ComputationError("At least two distinct periods are required to guess a rate")

    min_value = min(amounts)
    max_value = max(amounts)
    if min_value == 0:
        raise ComputationError("Cannot guess a rate when the smallest amount is zero")

    exponent = 1 / (len(periods) - 1)
    multiple = 1 + abs(max_value / min_value)
    return round_float(multiple ** exponent - 1, precision)
