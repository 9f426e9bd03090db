"""Data models for xirrcalc."""

from .enums import ResultStatus, ErrorKind
from .errors import (
    XIRRError,
    LengthMismatchError,
    NoSignMixError,
    InvalidInputError,
    ConvergenceError,
    ZeroRateError,
    ComputationError,
)
from .rational_period import RationalPeriod
from .cash_flow import CashFlow
from .result import RateResult

__all__ = [
    "ResultStatus",
    "ErrorKind",
    "XIRRError",
    "LengthMismatchError",
    "NoSignMixError",
    "InvalidInputError",
    "ConvergenceError",
    "ZeroRateError",
    "ComputationError",
    "RationalPeriod",
    "CashFlow",
    "RateResult",
]
