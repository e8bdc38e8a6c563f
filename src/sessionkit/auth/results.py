"""Result type returned by sign-up and sign-in."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again."


@dataclass(frozen=True)
class OperationResult:
    """Tagged success/failure outcome, returned instead of raised."""

    success: bool
    data: Any = None
    error: str | None = None

    @classmethod
    def ok(cls, data: Any = None) -> OperationResult:
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, message: str) -> OperationResult:
        return cls(success=False, error=message)

    def __bool__(self) -> bool:
        return self.success
