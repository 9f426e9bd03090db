"""Enumeration types for xirrcalc."""

from enum import Enum


class ResultStatus(Enum):
    """Outcome of a rate computation."""
    OK = "OK"
    ERROR = "ERROR"


class ErrorKind(Enum):
    """Failure kinds reported by the solvers and rate converter."""

    # Input validation
    LENGTH_MISMATCH = "Date and Value collections must have the same size"
    NO_SIGN_MIX = "Values should have at least one positive or negative value."
    INVALID_INPUT = "Invalid cash flow input"

    # Solver outcomes
    COULD_NOT_CONVERGE = "Could not converge"
    GAVE_UP = "I give up"
    UNABLE_TO_CONVERGE = "Unable to converge"

    # Rate conversion
    ZERO_RATE = "Rate is 0"

    # Internal faults
    UNCAUGHT = "Uncaught error"
    COMPUTATION_ERROR = "Computation error"

    @property
    def message(self) -> str:
        """Default human-readable message."""
        return self.value

    @classmethod
    def is_convergence_failure(cls, kind: "ErrorKind") -> bool:
        """Check if the kind means the iteration did not settle on a rate."""
        return kind in {cls.COULD_NOT_CONVERGE, cls.GAVE_UP, cls.UNABLE_TO_CONVERGE}

    @classmethod
    def is_input_error(cls, kind: "ErrorKind") -> bool:
        """Check if the kind was caused by the caller's input."""
        return kind in {cls.LENGTH_MISMATCH, cls.NO_SIGN_MIX, cls.INVALID_INPUT, cls.ZERO_RATE}
