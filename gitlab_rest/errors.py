"""Exception hierarchy for gitlab-rest."""

from typing import Any


class Error(Exception):
    """Base class for every error raised by gitlab-rest."""


class ConfigurationError(Error, ValueError):
    """Raised when the endpoint or token is missing or malformed."""


class TransportError(Error):
    """Raised when the HTTP round-trip itself fails (DNS, refused connection, timeout)."""


class ParseError(Error):
    """Raised when a body expected to be JSON cannot be decoded."""


class UnsupportedMethodError(Error):
    """Raised when a verb outside GET/POST/PUT/DELETE is requested."""


class DocumentTypeError(Error, TypeError):
    """Raised when a Document accessor does not match the value's kind."""


class HttpStatusError(Error):
    """Raised for a non-2xx response.

    Used directly for status codes without a dedicated subclass.

    Attributes:
        status_code: HTTP status code
        message: Message extracted from the response body
        method: HTTP verb of the failed request
        uri: Request URI of the failed request
        response_body: Raw response body text
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        uri: str,
        method: str | None = None,
        response_body: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.uri = uri
        self.method = method
        self.response_body = response_body
        super().__init__(f"Server responded with code {status_code}, message: {message}. Request URI: {uri}")


class BadRequest(HttpStatusError):
    """400 Bad Request."""


class Unauthorized(HttpStatusError):
    """401 Unauthorized."""


class Forbidden(HttpStatusError):
    """403 Forbidden."""


class NotFound(HttpStatusError):
    """404 Not Found."""


class MethodNotAllowed(HttpStatusError):
    """405 Method Not Allowed."""


class Conflict(HttpStatusError):
    """409 Conflict."""


class Unprocessable(HttpStatusError):
    """422 Unprocessable Entity."""


class InternalServerError(HttpStatusError):
    """500 Internal Server Error."""


class BadGateway(HttpStatusError):
    """502 Bad Gateway."""


class ServiceUnavailable(HttpStatusError):
    """503 Service Unavailable."""


STATUS_ERRORS: dict[int, type[HttpStatusError]] = {
    400: BadRequest,
    401: Unauthorized,
    403: Forbidden,
    404: NotFound,
    405: MethodNotAllowed,
    409: Conflict,
    422: Unprocessable,
    500: InternalServerError,
    502: BadGateway,
    503: ServiceUnavailable,
}


def error_for_status(status_code: int) -> type[HttpStatusError]:
    """Return the exception class used for a status code."""
    return STATUS_ERRORS.get(status_code, HttpStatusError)


def format_error_message(payload: Any) -> str:
    """Render a GitLab ``message``/``error`` field as a single line.

    GitLab validation failures return a mapping of field name to a list of
    problems, e.g. ``{"email": ["has already been taken"]}``.
    """
    if isinstance(payload, dict):
        parts = []
        for key, value in payload.items():
            if isinstance(value, list):
                value = ", ".join(str(item) for item in value)
            parts.append(f"{key}: {value}")
        return "; ".join(parts)
    if isinstance(payload, list):
        return ", ".join(str(item) for item in payload)
    return str(payload)
