"""DRF exception handler turning service errors into JSON error responses."""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from recipes.errors import (
    ConflictError,
    EngagementError,
    Forbidden,
    NotFound,
    OperationTimedOut,
    Unauthorized,
    ValidationError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = (
    (NotFound, status.HTTP_404_NOT_FOUND),
    (Unauthorized, status.HTTP_401_UNAUTHORIZED),
    (Forbidden, status.HTTP_403_FORBIDDEN),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_409_CONFLICT),
    (OperationTimedOut, status.HTTP_504_GATEWAY_TIMEOUT),
)


def status_for(exc):
    for error_class, code in STATUS_BY_ERROR:
        if isinstance(exc, error_class):
            return code
    return status.HTTP_400_BAD_REQUEST


def error_body(code, message):
    return {"error": {"code": code, "message": message}}


def engagement_exception_handler(exc, context):
    """Map EngagementError subclasses to HTTP; defer everything else to DRF."""
    if isinstance(exc, EngagementError):
        http_status = status_for(exc)
        if http_status == status.HTTP_504_GATEWAY_TIMEOUT:
            view = context.get("view")
            logger.warning("deadline exceeded in %s", type(view).__name__ if view else "unknown view")
        return Response(error_body(exc.code, exc.detail), status=http_status)
    return exception_handler(exc, context)
