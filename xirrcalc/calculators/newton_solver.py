"""Newton-Raphson XIRR solver."""

import logging
from typing import List, Optional, Tuple

from ..config.settings import settings
from ..models.enums import ErrorKind
from ..models.errors import ConvergenceError
from ..models.rational_period import RationalPeriod
from ..utils.math_utils import discounted_derivative, discounted_value, round_float
from ..utils.parallel import ParallelReducer
from .normalizer import NormalizedFlow
from .rate_guesser import guess_rate

logger = logging.getLogger(__name__)

Term = Tuple[RationalPeriod, float, float]


def _value_term(term: Term) -> float:
    period, amount, rate = term
    return discounted_value(amount, period, rate)


def _derivative_term(term: Term) -> float:
    period, amount, rate = term
    return discounted_derivative(amount, period, rate)


class NewtonSolver:
    """
    Solve XNPV(rate) = 0 by Newton-Raphson iteration.

    XNPV  = Σ [CFᵢ / (1 + r)^pᵢ]
    XNPV' = Σ [-CFᵢ × pᵢ × (1 + r)^(-pᵢ - 1)]

    Where pᵢ is the RationalPeriod of flow i. Both sums are evaluated in
    parallel and rounded to ``precision`` decimals. A negative derivative
    holds the rate in place for that round. The step is snapped to zero
    once it falls below ``max_error``, and the next iteration returns.
    Any rate at or below -1.0 ends the solve as diverged.
    """

    def __init__(
        self,
        max_iterations: int = None,
        max_error: float = None,
        precision: int = None,
        guess_precision: int = None,
        max_workers: Optional[int] = None,
    ):
        self.max_iterations = max_iterations or settings.xirr_max_iterations
        self.max_error = max_error or settings.newton_max_error
        self.precision = precision or settings.newton_precision
        self.guess_precision = guess_precision or settings.newton_guess_precision
        self.result_precision = settings.result_precision
        self.max_workers = max_workers or settings.max_workers

    def seed(self, flow: NormalizedFlow) -> float:
        return guess_rate(flow.periods, flow.amounts, self.guess_precision)

    def solve(self, flow: NormalizedFlow, guess: Optional[float] = None) -> float:
        """
        Find the annualized rate for a normalized flow.

        Args:
            flow: Output of CashFlowNormalizer
            guess: Optional seed, defaults to the magnitude heuristic

        Returns:
            Rate rounded to ``result_precision`` decimals

        Raises:
            ConvergenceError: On divergence to -1.0 or after max_iterations
        """
        rate = self.seed(flow) if guess is None else guess
        terms = flow.terms
        step: Optional[float] = None
        iteration = 0

        logger.debug("Newton solve: %d terms, seed %s", len(terms), rate)

        with ParallelReducer(self.max_workers) as reducer:
            while True:
                # (1 + rate) <= 0 has no meaningful discount factor
                if rate <= -1.0:
                    logger.info("Newton diverged to %s after %d iterations", rate, iteration)
                    raise ConvergenceError(ErrorKind.COULD_NOT_CONVERGE, rate, iteration)
                if step == 0.0:
                    result = round_float(rate, self.result_precision)
                    if result <= -1.0:
                        raise ConvergenceError(ErrorKind.COULD_NOT_CONVERGE, rate, iteration)
                    logger.info("Newton converged to %s after %d iterations", rate, iteration)
                    return result
                if iteration >= self.max_iterations:
                    logger.info("Newton gave up after %d iterations at %s", iteration, rate)
                    raise ConvergenceError(ErrorKind.GAVE_UP, rate, iteration)

                value, derivative = self.reduce(reducer, terms, rate)
                new_rate = rate if derivative < 0.0 else rate - value / derivative

                step = abs(new_rate - rate)
                if step < self.max_error:
                    step = 0.0

                logger.debug(
                    "Newton iteration %d: rate=%s value=%s derivative=%s step=%s",
                    iteration, rate, value, derivative, step,
                )
                rate = new_rate
                iteration += 1

    def reduce(
        self,
        reducer: ParallelReducer,
        terms: List[Tuple[RationalPeriod, float]],
        rate: float,
    ) -> Tuple[float, float]:
        """Evaluate XNPV and its derivative at ``rate``."""
        triples = [(period, amount, rate) for period, amount in terms]
        value = round_float(reducer.sum(_value_term, triples), self.precision)
        derivative = round_float(reducer.sum(_derivative_term, triples), self.precision)
        return value, derivative
