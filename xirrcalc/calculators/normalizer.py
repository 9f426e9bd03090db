"""Normalization of dated cash flows into rational-period flow sets."""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Sequence, Tuple

from ..config.settings import settings
from ..models.cash_flow import CashFlow
from ..models.errors import InvalidInputError, LengthMismatchError, NoSignMixError
from ..models.rational_period import RationalPeriod
from ..utils.date_utils import day_count_actual_365, parse_date

logger = logging.getLogger(__name__)


@dataclass
class NormalizedFlow:
    """
    Cash flows keyed by their period since the earliest date.

    ``flows`` holds every distinct period with its summed amount.
    ``terms`` is the solver domain: the same entries, chronological,
    without the periods whose amounts cancelled out to zero.
    """

    min_date: date
    flows: Dict[RationalPeriod, float] = field(default_factory=dict)
    entry_count: int = 0

    @property
    def periods(self) -> List[RationalPeriod]:
        return list(self.flows.keys())

    @property
    def amounts(self) -> List[float]:
        return list(self.flows.values())

    @property
    def terms(self) -> List[Tuple[RationalPeriod, float]]:
        return sorted(
            ((period, amount) for period, amount in self.flows.items() if amount != 0),
            key=lambda item: item[0].to_float(),
        )

    @property
    def period_count(self) -> int:
        return len(self.flows)

    @property
    def nonzero_count(self) -> int:
        return len(self.terms)

    @property
    def is_consistent(self) -> bool:
        """
        Check the invariants of a normalized flow.

        Every period is non-negative and shares one denominator, and
        aggregation never yields more periods than entries.
        """
        denominators = {period.denominator for period in self.flows}
        return (
            len(denominators) <= 1
            and all(period.numerator >= 0 for period in self.flows)
            and self.period_count <= self.entry_count
        )

    def first_amount(self) -> Optional[float]:
        """Aggregated amount of the chronologically first non-zero term."""
        terms = self.terms
        return terms[0][1] if terms else None


class CashFlowNormalizer:
    """Convert parallel date/amount lists into a NormalizedFlow."""

    def __init__(self, days_in_year: int = None, date_format: Optional[str] = None):
        """
        Initialize normalizer.

        Args:
            days_in_year: Denominator of every period
            date_format: Optional strptime format for string dates
        """
        self.days_in_year = days_in_year or settings.days_in_year
        self.date_format = date_format or settings.date_format

    def normalize(self, dates: Sequence, amounts: Sequence) -> NormalizedFlow:
        """
        Normalize cash flows.

        Args:
            dates: Cash flow dates (date, datetime, ISO string or (y, m, d) tuple)
            amounts: Signed cash flow amounts

        Returns:
            NormalizedFlow keyed by RationalPeriod

        Raises:
            LengthMismatchError: If the lists differ in length
            NoSignMixError: If amounts are all inflows or all outflows
            InvalidInputError: If a date or amount cannot be parsed
        """
        if len(dates) != len(amounts):
            raise LengthMismatchError()

        cash_flows = self._build_cash_flows(dates, amounts)
        if not cash_flows:
            raise InvalidInputError("At least one cash flow is required")

        if not self.verify_flow([cf.amount for cf in cash_flows]):
            raise NoSignMixError()

        min_date = min(cf.date for cf in cash_flows)
        normalized = NormalizedFlow(min_date=min_date, entry_count=len(cash_flows))

        for cf in cash_flows:
            days = day_count_actual_365(min_date, cf.date)
            period = RationalPeriod.from_days(days, self.days_in_year)
            normalized.flows[period] = normalized.flows.get(period, 0.0) + cf.amount

        logger.debug(
            "Normalized %d cash flows into %d periods (%d non-zero) from %s",
            normalized.entry_count,
            normalized.period_count,
            normalized.nonzero_count,
            min_date.isoformat(),
        )
        return normalized

    def _build_cash_flows(self, dates: Sequence, amounts: Sequence) -> List[CashFlow]:
        cash_flows = []
        for index, (date_input, amount) in enumerate(zip(dates, amounts)):
            try:
                cash_flows.append(
                    CashFlow(date=parse_date(date_input, self.date_format), amount=amount)
                )
            except (TypeError, ValueError, OverflowError) as e:
                raise InvalidInputError(f"Invalid cash flow at position {index}: {e}") from e
        return cash_flows

    @staticmethod
    def verify_flow(amounts: Sequence[float]) -> bool:
        """Check for at least one strictly positive and one strictly negative amount."""
        return any(a > 0 for a in amounts) and any(a < 0 for a in amounts)
