"""Map domain errors to HTTP responses."""

from rest_framework import status
from rest_framework.response import Response

from bookings.domain.errors import DomainError, FailureKind

STATUS_BY_KIND = {
    FailureKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    FailureKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
}


def error_response(error: DomainError) -> Response:
    """Build a response exposing only the error code and safe message."""
    return Response(
        {"code": error.code.value, "message": error.message},
        status=STATUS_BY_KIND[error.kind],
    )
