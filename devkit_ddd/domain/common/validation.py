"""
Normalisation of validation results.

Every ``validate``/``validate_payload`` hook of a value object, entity or
domain event returns a ValidationResult. handle_validation_result is the
only place that interprets it, so failures surface uniformly as
ArgumentInvalidError unless the hook already produced a toolkit error.
"""

import logging

import structlog

from .exceptions import ArgumentInvalidError, DddError
from .types import ValidationResult

logger = structlog.wrap_logger(logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger)


def handle_validation_result(result: ValidationResult) -> None:
    """
    Raise if result describes a validation failure.

    Args:
        result: None or True on success; False, a message or an exception
            on failure

    Raises:
        DddError: The result itself, when it is already a toolkit error
        ArgumentInvalidError: For every other failure; only the message of
            a foreign exception is kept
    """
    if result is None or result is True:
        return

    if isinstance(result, DddError):
        logger.debug("validation_failed", error_code=result.code, message=result.message)
        raise result
    if isinstance(result, BaseException):
        logger.debug("validation_failed", error_type=type(result).__name__, message=str(result))
        raise ArgumentInvalidError(str(result))
    if isinstance(result, str):
        logger.debug("validation_failed", message=result)
        raise ArgumentInvalidError(result)
    if result is False:
        logger.debug("validation_failed")
        raise ArgumentInvalidError()

    raise TypeError(f"Unsupported validation result: {result!r}")
