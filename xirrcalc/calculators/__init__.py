"""Calculator modules for xirrcalc."""

from .normalizer import CashFlowNormalizer, NormalizedFlow
from .rate_guesser import guess_rate
from .newton_solver import NewtonSolver
from .legacy_solver import LegacyBisectionSolver
from .rate_converter import absolute_rate, annualize_rate
from .xirr_calculator import XIRRCalculator, SolverStrategy, xirr

__all__ = [
    "CashFlowNormalizer",
    "NormalizedFlow",
    "guess_rate",
    "NewtonSolver",
    "LegacyBisectionSolver",
    "absolute_rate",
    "annualize_rate",
    "XIRRCalculator",
    "SolverStrategy",
    "xirr",
]
