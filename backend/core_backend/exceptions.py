"""
Service-layer exceptions and the DRF exception handler that maps them to
HTTP responses.

Services raise these with a human-readable message; views never have to
translate them by hand.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base exception for business-rule failures raised by services."""

    status_code = status.HTTP_400_BAD_REQUEST
    kind = "error"

    def __init__(self, message=None):
        self.message = message or self.default_message()
        super().__init__(self.message)

    @classmethod
    def default_message(cls):
        return "Request could not be processed"


class NotFoundError(ServiceError):
    """Raised when a resource does not exist or is not visible to the caller."""

    status_code = status.HTTP_404_NOT_FOUND
    kind = "not_found"

    @classmethod
    def default_message(cls):
        return "Not found"


class BadRequestError(ServiceError):
    """Raised when input or current state makes the request invalid."""

    status_code = status.HTTP_400_BAD_REQUEST
    kind = "bad_request"


class ForbiddenError(ServiceError):
    """Raised when the caller may see a resource but not act on it."""

    status_code = status.HTTP_403_FORBIDDEN
    kind = "forbidden"

    @classmethod
    def default_message(cls):
        return "You do not have permission to perform this action"


def api_exception_handler(exc, context):
    """
    Project-wide DRF exception handler.

    ServiceError subclasses become `{"error": ..., "kind": ...}` bodies with
    their own status code. Everything else goes through DRF's default handler.
    """
    if isinstance(exc, ServiceError):
        request = context.get("request")
        view = context.get("view")
        logger.info(
            f"{exc.__class__.__name__} in {view.__class__.__name__ if view else 'unknown view'}: {exc.message}",
            extra={
                "status_code": exc.status_code,
                "path": getattr(request, "path", None),
                "method": getattr(request, "method", None),
            },
        )
        return Response({"error": exc.message, "kind": exc.kind}, status=exc.status_code)

    return exception_handler(exc, context)
