"""Error types raised by the Skylight client."""

import json

HTTP_UNAUTHORIZED = 401
HTTP_FORBIDDEN = 403
HTTP_NOT_FOUND = 404
HTTP_TOO_MANY_REQUESTS = 429
HTTP_SERVER_ERROR_MIN = 500
HTTP_SERVER_ERROR_MAX = 599


class SkylightError(Exception):
    """Base class for all client errors."""


class DecodeError(SkylightError):
    """The response envelope could not be decoded."""


class NetworkError(SkylightError):
    """The request never produced an HTTP response."""


class UnauthorizedError(SkylightError):
    """The backend rejected the credentials."""

    def __init__(self, message: str = "Unauthorized. Please log in again.") -> None:
        super().__init__(message)


class ForbiddenError(SkylightError):
    """The authenticated user may not access the resource."""

    def __init__(self, message: str = "Access denied") -> None:
        super().__init__(message)


class NotFoundError(SkylightError):
    """The requested resource does not exist."""

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message)


class RateLimitedError(SkylightError):
    """Too many requests were issued."""

    def __init__(
        self, message: str = "Too many requests. Please try again later."
    ) -> None:
        super().__init__(message)


class ServerError(SkylightError):
    """Any other non-success HTTP status."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        self.message = message
        if message:
            super().__init__(f"Server error ({status_code}): {message}")
        else:
            super().__init__(f"Server error: {status_code}")


def error_from_status(status_code: int, body: bytes | None = None) -> SkylightError:
    """Translate a non-2xx HTTP status into a typed error."""
    message = _error_message(body)
    if status_code == HTTP_UNAUTHORIZED:
        return UnauthorizedError()
    if status_code == HTTP_FORBIDDEN:
        return ForbiddenError()
    if status_code == HTTP_NOT_FOUND:
        return NotFoundError()
    if status_code == HTTP_TOO_MANY_REQUESTS:
        return RateLimitedError()
    if HTTP_SERVER_ERROR_MIN <= status_code <= HTTP_SERVER_ERROR_MAX:
        return ServerError(status_code, message or "Internal server error")
    return ServerError(status_code, message)


def _error_message(body: bytes | None) -> str | None:
    """Extract the backend's `message` or `error` field from a JSON body."""
    if not body:
        return None
    try:
        payload = json.loads(body)
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    for key in ("message", "error"):
        value = payload.get(key)
        if isinstance(value, str) and value:
            return value
    return None
