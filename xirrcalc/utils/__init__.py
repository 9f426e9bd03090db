"""Utility modules for xirrcalc."""

from .date_utils import (
    parse_date,
    parse_dates,
    day_count_actual_365,
)
from .math_utils import (
    round_float,
    power_of,
    discounted_value,
    discounted_derivative,
    sign,
)
from .parallel import ParallelReducer, parallel_sum

__all__ = [
    "parse_date",
    "parse_dates",
    "day_count_actual_365",
    "round_float",
    "power_of",
    "discounted_value",
    "discounted_derivative",
    "sign",
    "ParallelReducer",
    "parallel_sum",
]
