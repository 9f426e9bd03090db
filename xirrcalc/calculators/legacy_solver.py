"""Legacy three-point interval search for small cash flow series."""

import logging
import math
from typing import List, Optional, Tuple

from ..config.settings import settings
from ..models.enums import ErrorKind
from ..models.errors import ConvergenceError
from ..utils.math_utils import round_float, sign
from ..utils.parallel import ParallelReducer
from .normalizer import NormalizedFlow
from .rate_guesser import guess_rate

logger = logging.getLogger(__name__)


def _discounted_term(term: Tuple[float, float, float]) -> float:
    years, amount, rate = term
    return amount / math.pow(1 + rate, years)


class LegacyBisectionSolver:
    """
    Interval-narrowing XIRR search used for series under ten entries.

    The signed XNPV at the current rate decides the move:

        acc < 0             -> rate = (lower + rate) / 2, upper = rate
        acc > 0, at upper   -> rate = (rate + upper) / 2, lower = rate, upper += 1
        acc > 0             -> rate = (rate + upper) / 2, lower = rate
        acc == 0            -> converged on the next check

    XNPV is multiplied by the opposite sign of the chronologically first
    amount so that a positive accumulator always means the rate is too low.
    Only the first amount is consulted; series whose sign pattern differs
    from their first flow can walk the wrong way.
    """

    def __init__(
        self,
        max_iterations: int = None,
        precision: int = None,
        guess_precision: int = None,
        boundary_precision: int = None,
        max_workers: Optional[int] = None,
    ):
        self.max_iterations = max_iterations or settings.xirr_max_iterations
        self.precision = precision or settings.legacy_precision
        self.guess_precision = guess_precision or settings.legacy_guess_precision
        self.boundary_precision = boundary_precision or settings.legacy_boundary_precision
        self.result_precision = settings.result_precision
        self.max_workers = max_workers or settings.max_workers

    def seed(self, flow: NormalizedFlow) -> Tuple[float, float, float]:
        rate = guess_rate(flow.periods, flow.amounts, self.guess_precision)
        return rate, settings.legacy_lower_bound, settings.legacy_upper_bound

    def solve(self, flow: NormalizedFlow, bounds: Optional[Tuple[float, float, float]] = None) -> float:
        """
        Find the annualized rate for a normalized flow.

        Args:
            flow: Output of CashFlowNormalizer
            bounds: Optional (rate, lower, upper) seed

        Returns:
            Rate rounded to ``result_precision`` decimals

        Raises:
            ConvergenceError: On divergence to -1.0 or after max_iterations
        """
        rate, lower, upper = bounds or self.seed(flow)
        terms = [(period.to_float(), amount) for period, amount in flow.terms]
        direction = -sign(flow.first_amount() or 0.0)
        acc: Optional[float] = None
        tries = 0

        logger.debug("Legacy solve: %d terms, seed (%s, %s, %s)", len(terms), rate, lower, upper)

        with ParallelReducer(self.max_workers) as reducer:
            while True:
                if acc == 0.0:
                    result = round_float(rate, self.result_precision)
                    if result <= -1.0:
                        raise ConvergenceError(ErrorKind.COULD_NOT_CONVERGE, rate, tries)
                    logger.info("Legacy search converged to %s after %d tries", rate, tries)
                    return result
                if rate == -1.0:
                    logger.info("Legacy search diverged to -1.0 after %d tries", tries)
                    raise ConvergenceError(ErrorKind.COULD_NOT_CONVERGE, rate, tries)
                if tries >= self.max_iterations:
                    logger.info("Legacy search stopped after %d tries at %s", tries, rate)
                    raise ConvergenceError(ErrorKind.UNABLE_TO_CONVERGE, rate, tries)

                acc = self.accumulate(reducer, terms, rate) * direction
                rate, lower, upper = self.narrow(acc, rate, lower, upper)
                tries += 1

    def accumulate(self, reducer: ParallelReducer, terms: List[Tuple[float, float]], rate: float) -> float:
        """Rounded XNPV at ``rate`` using float year offsets."""
        total = reducer.sum(_discounted_term, [(years, amount, rate) for years, amount in terms])
        return round_float(total, self.precision)

    def reached_boundary(self, rate: float, upper: float) -> bool:
        return abs(round_float(rate - upper, self.boundary_precision)) == 0.0

    def narrow(self, acc: float, rate: float, lower: float, upper: float) -> Tuple[float, float, float]:
        """Apply one narrowing step and return the new (rate, lower, upper)."""
        if acc < 0:
            return (lower + rate) / 2, lower, rate
        if acc > 0 and self.reached_boundary(rate, upper):
            return (rate + upper) / 2, rate, upper + 1
        if acc > 0:
            return (rate + upper) / 2, rate, upper
        return rate, lower, upper
