"""Map domain errors to HTTP responses without exposing internal details."""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from coordination.domain.errors import DomainError, ErrorCode

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_STATE: status.HTTP_409_CONFLICT,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.STORAGE_CENTER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.VOLUNTEER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def domain_exception_handler(exc, context):
    """DRF exception handler that understands domain errors."""
    if isinstance(exc, DomainError):
        return Response(
            {"code": exc.code.value, "message": exc.message},
            status=STATUS_BY_CODE.get(exc.code, status.HTTP_400_BAD_REQUEST),
        )

    response = exception_handler(exc, context)
    if response is None:
        logger.exception("Unhandled error in %s", type(context.get("view")).__name__)
        return Response(
            {"code": "INTERNAL_ERROR", "message": "An error has occurred"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return response
