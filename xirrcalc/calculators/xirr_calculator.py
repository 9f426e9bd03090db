"""XIRR calculator dispatching between the Newton and legacy solvers."""

import logging
from enum import Enum
from typing import Optional, Sequence

from ..config.settings import settings
from ..models.enums import ErrorKind
from ..models.errors import ComputationError, XIRRError
from ..models.result import RateResult
from ..utils.math_utils import discounted_value, round_float
from ..utils.parallel import parallel_sum
from .legacy_solver import LegacyBisectionSolver
from .newton_solver import NewtonSolver
from .normalizer import CashFlowNormalizer, NormalizedFlow

logger = logging.getLogger(__name__)


class SolverStrategy(Enum):
    """Root finder used for a series."""
    NEWTON = "newton"
    LEGACY = "legacy"


class XIRRCalculator:
    """
    Calculate XIRR for irregularly dated cash flows.

    XIRR Formula: XNPV = Σ [CFᵢ / (1 + XIRR)^(tᵢ/365)] = 0

    Where:
        CFᵢ = Cash flow at time i
        tᵢ = Days from the earliest cash flow to cash flow i
        XIRR = Internal rate of return (annualized)

    Series with fewer than ``legacy_threshold`` entries use the legacy
    interval search, longer series use Newton-Raphson.
    """

    def __init__(
        self,
        newton: Optional[NewtonSolver] = None,
        legacy: Optional[LegacyBisectionSolver] = None,
        normalizer: Optional[CashFlowNormalizer] = None,
        legacy_threshold: int = None,
    ):
        self.newton = newton or NewtonSolver()
        self.legacy = legacy or LegacyBisectionSolver()
        self.normalizer = normalizer or CashFlowNormalizer()
        self.legacy_threshold = legacy_threshold or settings.legacy_threshold

    def select_strategy(self, entry_count: int) -> SolverStrategy:
        if entry_count < self.legacy_threshold:
            return SolverStrategy.LEGACY
        return SolverStrategy.NEWTON

    def calculate_xirr(self, dates: Sequence, amounts: Sequence) -> RateResult:
        """
        Calculate XIRR, choosing the solver from the number of entries.

        Args:
            dates: Cash flow dates
            amounts: Signed cash flow amounts, same length as dates

        Returns:
            RateResult with the annualized rate rounded to 6 decimals
        """
        if len(dates) != len(amounts):
            return RateResult.fail(ErrorKind.LENGTH_MISMATCH)
        return self.calculate(dates, amounts, self.select_strategy(len(dates)))

    def calculate_newton(self, dates: Sequence, amounts: Sequence) -> RateResult:
        """Calculate XIRR with Newton-Raphson regardless of series length."""
        return self.calculate(dates, amounts, SolverStrategy.NEWTON)

    def calculate_legacy(self, dates: Sequence, amounts: Sequence) -> RateResult:
        """Calculate XIRR with the legacy interval search regardless of series length."""
        return self.calculate(dates, amounts, SolverStrategy.LEGACY)

    def calculate(self, dates: Sequence, amounts: Sequence, strategy: SolverStrategy) -> RateResult:
        """Normalize the flows and run ``strategy``, converting failures to results."""
        try:
            flow = self.normalizer.normalize(dates, amounts)
            if not flow.is_consistent:
                return RateResult.fail(ErrorKind.UNCAUGHT)
            rate = self._solve(flow, strategy)
        except XIRRError as e:
            logger.info("XIRR (%s) failed: %s", strategy.value, e)
            return RateResult.from_error(e)
        except (ArithmeticError, ValueError, TypeError) as e:
            logger.info("XIRR (%s) computation error: %r", strategy.value, e)
            return RateResult.fail(ErrorKind.COMPUTATION_ERROR, str(e) or None, value=0.0)

        return RateResult.ok(rate)

    def _solve(self, flow: NormalizedFlow, strategy: SolverStrategy) -> float:
        logger.debug(
            "Solving %d entries over %d periods with %s",
            flow.entry_count, flow.period_count, strategy.value,
        )
        if strategy == SolverStrategy.LEGACY:
            return self.legacy.solve(flow)
        return self.newton.solve(flow)

    def calculate_npv(self, dates: Sequence, amounts: Sequence, rate: float) -> float:
        """
        Calculate Net Present Value of the normalized flow at ``rate``.

        Args:
            dates: Cash flow dates
            amounts: Signed cash flow amounts
            rate: Annual discount rate as decimal

        Returns:
            XNPV as float

        Raises:
            XIRRError: If the flows fail normalization or the rate is -1.0
        """
        flow = self.normalizer.normalize(dates, amounts)
        try:
            total = parallel_sum(
                lambda term: discounted_value(term[1], term[0], rate),
                flow.terms,
                settings.max_workers,
            )
        except (ArithmeticError, ValueError) as e:
            raise ComputationError(f"Cannot discount at rate {rate}: {e}") from e
        return round_float(total, settings.result_precision)


def xirr(dates: Sequence, amounts: Sequence) -> RateResult:
    """
    Convenience function to calculate XIRR.

    Args:
        dates: List of cash flow dates
        amounts: List of cash flow amounts

    Returns:
        RateResult with the annualized rate
    """
    return XIRRCalculator().calculate_xirr(dates, amounts)
