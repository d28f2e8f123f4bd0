"""
Result type for consistent error handling across services.

Services return success/failure states instead of raising, so callers can
surface the message to the user and leave their displayed state alone.

Usage:
    return Result.ok(generated)
    return Result.fail("Team A has 3 locked participants but only 2 slots",
                       code=error_codes.LOCKED_OVER_CAPACITY)

    result = service.generate_teams(selected)
    if result.success:
        show(result.value)
    else:
        warn(f"{result.error} ({result.error_code})")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    A simple result type for service method return values.

    Attributes:
        success: Whether the operation succeeded
        value: The return value if successful
        error: Error message if failed
        error_code: Error code from services.error_codes if failed
    """

    success: bool
    value: T | None = None
    error: str | None = None
    error_code: str | None = None

    @classmethod
    def ok(cls, value: T | None = None) -> "Result[T]":
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: str, code: str | None = None) -> "Result[T]":
        return cls(success=False, error=error, error_code=code)

    def __bool__(self) -> bool:
        return self.success

    def unwrap(self) -> T:
        """
        Get the value, raising ValueError if the result is a failure.

        Raises:
            ValueError: If the result is a failure
        """
        if not self.success:
            raise ValueError(f"Cannot unwrap failed result: {self.error}")
        return self.value  # type: ignore

    def unwrap_or(self, default: T) -> T:
        return self.value if self.success else default  # type: ignore
