"""Domain exceptions raised by the Series write pipeline.

These are business rule violations, not technical errors. Store failures
(connectivity, constraint violations) are never wrapped into these.
"""

from typing import Any
from uuid import UUID


class DomainException(Exception):
    """
    Base exception for all domain errors.
    
    Args:
        message: Human-readable error message
        **context: Additional context (series_id, code, ...)
    """

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class InvalidDataException(DomainException):
    """Raised when a required field is missing or malformed."""

    def __init__(self, reason: str, **context: Any) -> None:
        super().__init__(reason, **context)
        self.reason = reason


class SeriesNotFoundException(DomainException):
    """Raised when a referenced series does not exist."""

    def __init__(self, series_id: UUID) -> None:
        super().__init__(f"The series '{series_id}' was not found in the system.")
        self.series_id = series_id


class SeriesAlreadyExistsException(DomainException):
    """Raised when a series code or name is already taken."""

    def __init__(self, value: str) -> None:
        super().__init__(f"The series '{value}' already exists in the system.")
        self.value = value
