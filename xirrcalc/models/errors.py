"""Exception hierarchy raised inside the solvers."""

from typing import Optional

from .enums import ErrorKind


class XIRRError(Exception):
    """Base error carrying the ErrorKind reported to callers."""

    kind: ErrorKind = ErrorKind.UNCAUGHT

    def __init__(self, message: Optional[str] = None, kind: Optional[ErrorKind] = None):
        if kind is not None:
            self.kind = kind
        super().__init__(message or self.kind.message)

    @property
    def message(self) -> str:
        return str(self)


class LengthMismatchError(XIRRError):
    kind = ErrorKind.LENGTH_MISMATCH


class NoSignMixError(XIRRError):
    kind = ErrorKind.NO_SIGN_MIX


class InvalidInputError(XIRRError):
    kind = ErrorKind.INVALID_INPUT


class ConvergenceError(XIRRError):
    """Raised when a solver diverges or exhausts its iterations."""

    kind = ErrorKind.COULD_NOT_CONVERGE

    def __init__(self, kind: ErrorKind, rate: float, iterations: int):
        self.rate = rate
        self.iterations = iterations
        super().__init__(kind=kind)


class ZeroRateError(XIRRError):
    kind = ErrorKind.ZERO_RATE


class ComputationError(XIRRError):
    """Numeric domain fault while evaluating a term."""

    kind = ErrorKind.COMPUTATION_ERROR
