"""Best-effort outcome of a remote lookup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from trans_planner.domain.models.error_details import ErrorDetails

T = TypeVar("T")


@dataclass(frozen=True)
class LookupResult(Generic[T]):
    """Outcome of a gateway call.

    Failures never raise. A failed lookup carries ``error`` and no value, and
    callers collapse it to their empty baseline through ``unwrap_or``.
    """

    value: T | None = None
    error: ErrorDetails | None = None

    @property
    def ok(self) -> bool:
        """Whether the call completed without a transport, status or decode error."""
        return self.error is None

    @classmethod
    def success(cls, value: T) -> LookupResult[T]:
        """Build a successful result."""
        return cls(value=value)

    @classmethod
    def empty(cls) -> LookupResult[T]:
        """Build a successful result without a value (e.g. zero itineraries)."""
        return cls()

    @classmethod
    def failure(cls, reason: str, status_code: int | None = None) -> LookupResult[T]:
        """Build a failed result."""
        return cls(error=ErrorDetails(status_code=status_code, reason=reason))

    def unwrap_or(self, default: T) -> T:
        """Return the value, or ``default`` when the lookup failed or found nothing."""
        if self.value is None:
            return default
        return self.value
