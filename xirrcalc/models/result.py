"""Result values returned by the public entry points."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .enums import ErrorKind, ResultStatus
from .errors import XIRRError


@dataclass(frozen=True)
class RateResult:
    """
    Success/failure union for rate computations.

    On success ``status`` is OK and ``value`` holds the rate. On failure
    ``status`` is ERROR, ``error`` names the failure kind and ``value`` is
    a placeholder that must not be used as a rate.
    """

    status: ResultStatus
    value: Optional[float] = None
    error: Optional[ErrorKind] = None
    message: Optional[str] = None

    @classmethod
    def ok(cls, value: float) -> "RateResult":
        return cls(status=ResultStatus.OK, value=value)

    @classmethod
    def fail(cls, kind: ErrorKind, message: Optional[str] = None, value: Optional[float] = None) -> "RateResult":
        return cls(status=ResultStatus.ERROR, value=value, error=kind, message=message or kind.message)

    @classmethod
    def from_error(cls, error: XIRRError, value: Optional[float] = None) -> "RateResult":
        return cls.fail(error.kind, error.message, value)

    @property
    def is_ok(self) -> bool:
        return self.status == ResultStatus.OK

    @property
    def is_error(self) -> bool:
        return self.status == ResultStatus.ERROR

    def unwrap(self) -> float:
        """Return the value, or raise XIRRError for a failed result."""
        if self.is_error:
            raise XIRRError(self.message, kind=self.error)
        return self.value

    def value_or(self, default: Any) -> Any:
        return self.value if self.is_ok else default

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for reporting."""
        return {
            "status": self.status.value,
            "value": self.value,
            "error": self.error.name if self.error else None,
            "message": self.message,
        }
