"""API error taxonomy and the JSON renderer for it.

Every error response body has the shape ``{"error": <message>}``.
"""

from litestar import Request
from litestar.exceptions import HTTPException
from litestar.response import Response
from litestar.status_codes import (
    HTTP_400_BAD_REQUEST,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from timeline.utils.logging import log_request_error

INTERNAL_ERROR_MESSAGE = "Internal server error"


class ValidationError(HTTPException):
    """Missing or malformed request input."""
    status_code = HTTP_400_BAD_REQUEST


class ForbiddenError(HTTPException):
    """Endpoint not available in this deployment."""
    status_code = HTTP_403_FORBIDDEN

    def __init__(self, detail: str = "Forbidden") -> None:
        super().__init__(detail=detail)


class NotFoundError(HTTPException):
    """Lookup returned no record."""
    status_code = HTTP_404_NOT_FOUND


class InternalError(HTTPException):
    """Any other failure. The detail never carries the cause."""
    status_code = HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self) -> None:
        super().__init__(detail=INTERNAL_ERROR_MESSAGE)


def error_response(message: str, status_code: int) -> Response:
    return Response(
        content={"error": message},
        status_code=status_code,
        media_type="application/json",
    )


def handle_http_exception(request: Request, exc: HTTPException) -> Response:
    """Render any HTTP exception (ours or Litestar's) as ``{"error": detail}``."""
    if exc.status_code >= HTTP_500_INTERNAL_SERVER_ERROR:
        return error_response(INTERNAL_ERROR_MESSAGE, exc.status_code)
    return error_response(exc.detail, exc.status_code)


def handle_unexpected_exception(request: Request, exc: Exception) -> Response:
    log_request_error(request, exc, message="Unhandled exception occurred")
    return error_response(INTERNAL_ERROR_MESSAGE, HTTP_500_INTERNAL_SERVER_ERROR)
