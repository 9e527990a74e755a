"""
Domain layer exceptions.

These exceptions represent failures raised while building or converting
domain objects. Every error raised by this library derives from DddError,
so callers can catch a single type and still read a stable error code.
"""

from typing import ClassVar

from .error_codes import DDD_ERROR_CODES


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
    so they can be caught and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class DddError(DomainError):
    """
    Base exception for errors raised by the modeling toolkit itself.

    Subclasses declare a stable ``code`` taken from DDD_ERROR_CODES.
    """

    code: ClassVar[str] = "ddd/error"

    def __str__(self) -> str:
        return f"{type(self).__name__} ({self.code}): {super().__str__()}"


class ArgumentInvalidError(DddError):
    """
    Raised when a value object, entity or domain event fails validation.

    Example: undefined props, an empty structured value, a rejected
    ``validate`` result, a missing aggregate id.
    """

    code: ClassVar[str] = DDD_ERROR_CODES["argument-invalid"]

    def __init__(self, message: str = "Argument is invalid", details: dict[str, object] | None = None) -> None:
        super().__init__(message, details)


class InvalidInputError(DddError):
    """
    Raised when a value cannot be converted to JSON.

    Example: converting UNSET, bytes or a function in strict mode.
    """

    code: ClassVar[str] = DDD_ERROR_CODES["invalid-input"]

    def __init__(self, message: str, value: object = None) -> None:
        super().__init__(message)
        self.value = value
