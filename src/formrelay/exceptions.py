"""Application exceptions and their JSON error responses."""

from fastapi import Request
from fastapi.responses import JSONResponse


class FormRelayError(Exception):
    """
    Base exception for the form relay service.

    Carries the HTTP status and the message that is safe to show the caller.
    """

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class FormValidationError(FormRelayError):
    """Raised when a submission is missing a required field or attachment."""

    status_code = 400


class UploadTooLargeError(FormRelayError):
    """Raised when an uploaded file exceeds the in-memory size cap."""

    status_code = 413

    def __init__(self, limit: int) -> None:
        super().__init__("Resume exceeds the maximum upload size")
        self.limit = limit


class OriginNotAllowedError(FormRelayError):
    """Raised when a browser request comes from an origin outside the allow-list."""

    status_code = 403

    def __init__(self, origin: str) -> None:
        super().__init__(f"Origin not allowed: {origin}")
        self.origin = origin


class MailTransportError(FormRelayError):
    """Raised when the SMTP transport cannot deliver a message."""

    status_code = 500


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the ``{success: false, message}`` body used for every failure."""
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


async def formrelay_exception_handler(request: Request, exc: FormRelayError) -> JSONResponse:
    """Render a FormRelayError; server-side failures get a generic message."""
    if exc.status_code >= 500:
        return error_response(exc.status_code, "Internal server error")
    return error_response(exc.status_code, exc.message)
