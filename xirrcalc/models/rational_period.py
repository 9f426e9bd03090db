"""Exact rational time offsets used as XIRR exponents."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RationalPeriod:
    """
    A time offset of ``numerator / denominator`` years.

    The fraction is never reduced: two periods are the same map key only
    when both fields match. Periods are built as ``days / 365`` so this
    holds for every flow in a series. Use ``same_value`` to compare
    periods built with different denominators.
    """

    numerator: int
    denominator: int = 365

    def __post_init__(self):
        if isinstance(self.numerator, bool) or not isinstance(self.numerator, int):
            raise TypeError(f"numerator must be int, got {type(self.numerator).__name__}")
        if isinstance(self.denominator, bool) or not isinstance(self.denominator, int):
            raise TypeError(f"denominator must be int, got {type(self.denominator).__name__}")
        if self.denominator <= 0:
            raise ValueError("denominator must be positive")

    @classmethod
    def from_days(cls, days: int, days_in_year: int = 365) -> "RationalPeriod":
        """Build the period for a day count since the first cash flow."""
        return cls(days, days_in_year)

    def negative(self) -> "RationalPeriod":
        """Return the period with the numerator sign flipped."""
        return RationalPeriod(-self.numerator, self.denominator)

    def to_float(self) -> float:
        return self.numerator / self.denominator

    def same_value(self, other: "RationalPeriod") -> bool:
        """Compare by value rather than by exact numerator/denominator pair."""
        return self.numerator * other.denominator == other.numerator * self.denominator

    @property
    def is_odd(self) -> bool:
        """True when the numerator is odd, i.e. (-1)**numerator == -1."""
        return self.numerator % 2 != 0

    def __float__(self) -> float:
        return self.to_float()

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"
