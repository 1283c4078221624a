"""
API exception handlers.

Errors that escape the product handlers (malformed bodies, unknown
routes, unsupported methods) are rendered in the same envelope as
operation failures.
"""

import logging
from typing import Any, Dict

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.domain.result import ErrorKind

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.DUPLICATE_NAME: status.HTTP_409_CONFLICT,
    ErrorKind.PERSISTENCE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

INTERNAL_ERROR = "An internal error occurred"


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Custom exception handler for REST API."""
    if isinstance(exc, APIException):
        response = exception_handler(exc, context)
        if response:
            detail = response.data.get("detail", exc.default_detail)
            response.data = {"success": False, "error": str(detail)}
            return response

    if isinstance(exc, Http404):
        return Response(
            {"success": False, "error": "Resource not found"},
            status=status.HTTP_404_NOT_FOUND,
        )

    return _handle_unexpected_exception(exc)


def _handle_unexpected_exception(exc: Exception) -> Response:
    """Handle unexpected or untracked exceptions."""
    logger.error("Unexpected error: %s", exc, exc_info=True)
    return Response(
        {"success": False, "error": INTERNAL_ERROR},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
