"""Solver configuration settings."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Settings for the XIRR solvers and rate conversion."""

    # Iteration limits
    xirr_max_iterations: int = 300
    legacy_threshold: int = 10

    # Newton-Raphson
    newton_max_error: float = 1.0e-3
    newton_precision: int = 6
    newton_guess_precision: int = 6

    # Legacy three-point search
    legacy_precision: int = 4
    legacy_guess_precision: int = 3
    legacy_boundary_precision: int = 2
    legacy_lower_bound: float = -1.0
    legacy_upper_bound: float = 1.0

    # Output rounding
    result_precision: int = 6
    absolute_rate_precision: int = 2

    # Calendar
    days_in_year: int = 365
    date_format: Optional[str] = None

    # Parallel reductions (None lets the executor pick)
    max_workers: Optional[int] = None

    # Logging
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate numeric limits."""
        if self.xirr_max_iterations <= 0:
            raise ValueError("xirr_max_iterations must be positive")
        if self.days_in_year <= 0:
            raise ValueError("days_in_year must be positive")
        if self.max_workers is not None and self.max_workers <= 0:
            raise ValueError("max_workers must be positive")


# Global settings instance
settings = Settings()
