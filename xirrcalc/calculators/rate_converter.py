"""Conversion of annualized rates into period returns."""

import logging
import math

from ..config.settings import settings
from ..models.enums import ErrorKind
from ..models.result import RateResult
from ..utils.math_utils import round_float

logger = logging.getLogger(__name__)


def absolute_rate(rate: float, days: int) -> RateResult:
    """
    Convert an annualized rate into the return realized over ``days``.

    Below one year the rate is de-annualized:
        ((1 + rate) ^ (days / 365) - 1) × 100
    From one year on the annualized rate is reported as is:
        rate × 100

    Args:
        rate: Annualized rate as decimal (e.g. 0.12 for 12%)
        days: Elapsed days

    Returns:
        RateResult holding a percentage rounded to 2 decimals. A zero rate
        fails with ZERO_RATE; numeric faults fail with COMPUTATION_ERROR
        and a 0.0 placeholder.
    """
    if rate == 0:
        return RateResult.fail(ErrorKind.ZERO_RATE)

    days_in_year = settings.days_in_year
    precision = settings.absolute_rate_precision

    try:
        if days < days_in_year:
            value = (math.pow(1 + rate, days / days_in_year) - 1) * 100
        else:
            value = rate * 100
        return RateResult.ok(round_float(value, precision))
    except (ArithmeticError, ValueError, TypeError) as e:
        logger.info("absolute_rate(%r, %r) failed: %s", rate, days, e)
        return RateResult.fail(ErrorKind.COMPUTATION_ERROR, str(e) or None, value=0.0)


def annualize_rate(percentage: float, days: int) -> float:
    """
    Re-annualize a period return produced by ``absolute_rate``.

    Formula: (1 + percentage / 100) ^ (365 / days) - 1
    """
    if days <= 0:
        raise ValueError("days must be positive")
    return math.pow(1 + percentage / 100, settings.days_in_year / days) - 1
