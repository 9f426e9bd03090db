"""Annualized internal rate of return for irregular cash flow series."""

import logging

from .calculators import (
    XIRRCalculator,
    SolverStrategy,
    NewtonSolver,
    LegacyBisectionSolver,
    CashFlowNormalizer,
    xirr,
    absolute_rate,
)
from .config import Settings, settings, configure_logging
from .models import ErrorKind, RateResult, ResultStatus, RationalPeriod, XIRRError

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "xirr",
    "absolute_rate",
    "XIRRCalculator",
    "SolverStrategy",
    "NewtonSolver",
    "LegacyBisectionSolver",
    "CashFlowNormalizer",
    "Settings",
    "settings",
    "configure_logging",
    "ErrorKind",
    "RateResult",
    "ResultStatus",
    "RationalPeriod",
    "XIRRError",
]
