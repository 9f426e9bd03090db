"""Cash flow entry model."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from ..utils.date_utils import parse_date


@dataclass
class CashFlow:
    """Represents a dated cash flow. Positive is an inflow, negative an outflow."""
    date: date
    amount: float

    def __post_init__(self):
        """Normalize date and amount types."""
        if isinstance(self.date, datetime):
            self.date = self.date.date()
        elif not isinstance(self.date, date):
            self.date = parse_date(self.date)
        if not isinstance(self.amount, float):
            self.amount = float(self.amount)

    @classmethod
    def from_pair(cls, date_input: Any, amount: Any) -> "CashFlow":
        """Build a CashFlow from a (date, amount) pair."""
        return cls(date=date_input, amount=amount)

    @property
    def is_inflow(self) -> bool:
        return self.amount > 0

    @property
    def is_outflow(self) -> bool:
        return self.amount < 0
