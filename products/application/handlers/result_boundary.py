"""
Result boundary for product handlers.

Handlers raise domain exceptions internally; this decorator turns every
exception into a Failure so no operation ever raises to its caller.
"""

import functools
import logging

from core.domain.exceptions import (
    DuplicateProductNameError,
    ProductNotFoundError,
    ProductValidationError,
)
from core.domain.result import ErrorKind, Failure

logger = logging.getLogger(__name__)


def returns_result(operation: str, fallback_message: str):
    """
    Wrap an async ``handle`` method so it always returns a Result.

    Args:
        operation: Operation name for logs
        fallback_message: Error message when the store gives none
    """

    def decorator(handle):
        @functools.wraps(handle)
        async def wrapper(self, request):
            try:
                return await handle(self, request)
            except ProductValidationError as e:
                return Failure(kind=ErrorKind.VALIDATION, error=e.message, errors=e.errors)
            except ProductNotFoundError as e:
                logger.warning("%s: %s", operation, e.message, extra={"operation": operation})
                return Failure(kind=ErrorKind.NOT_FOUND, error=e.message)
            except DuplicateProductNameError as e:
                logger.warning("%s: %s", operation, e.message, extra={"operation": operation})
                return Failure(kind=ErrorKind.DUPLICATE_NAME, error=e.message)
            except Exception as e:  # pylint: disable=broad-exception-caught
                logger.error(
                    "Error in %s: %s", operation, e, extra={"operation": operation}, exc_info=True
                )
                return Failure(kind=ErrorKind.PERSISTENCE, error=str(e) or fallback_message)

        return wrapper

    return decorator
