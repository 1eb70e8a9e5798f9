"""HTTP response wrapper and status classification."""

import json
import logging
from typing import Any

import httpx

from gitlab_rest.document import Document
from gitlab_rest.errors import error_for_status, format_error_message

logger = logging.getLogger(__name__)


def _extract_message(body: str) -> str:
    """Pull the ``message`` or ``error`` field out of a JSON error body.

    Falls back to the raw body text when it is not a JSON object carrying
    either field.
    """
    try:
        payload: Any = json.loads(body)
    except (json.JSONDecodeError, TypeError):
        return body
    if isinstance(payload, dict):
        for field in ("message", "error"):
            if payload.get(field):
                return format_error_message(payload[field])
    return body


class Response:
    """An HTTP response together with the method and URI that produced it."""

    __slots__ = ("method", "uri", "status_code", "body", "headers")

    def __init__(self, method: str, uri: str, status_code: int, body: str, headers: httpx.Headers) -> None:
        self.method = method
        self.uri = uri
        self.status_code = status_code
        self.body = body
        self.headers = headers

    @classmethod
    def parse(cls, raw: httpx.Response, method: str, uri: str | httpx.URL) -> "Response":
        """Wrap ``raw`` and raise the matching HttpStatusError for a non-2xx status.

        Args:
            raw: Response returned by httpx
            method: HTTP verb used for the request
            uri: Final request URI, including the query string

        Returns:
            The wrapped Response when the status is 2xx

        Raises:
            HttpStatusError: Subclass matching the status code (BadRequest, NotFound, ...)
        """
        response = cls(method, str(uri), raw.status_code, raw.text, raw.headers)
        if response.is_success:
            return response

        message = _extract_message(response.body)
        logger.error(f"GitLab API error for {method} {response.uri}: {response.status_code} - {response.body[:200]}")
        error_class = error_for_status(response.status_code)
        raise error_class(response.status_code, message, response.uri, method, response.body)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Document:
        """Parse the body into a Document.

        A 204 No Content response, which GitLab sends for most deletions,
        yields ``Document(True)``.

        Raises:
            ParseError: If the body of any other status is empty or not valid JSON
        """
        if self.status_code == 204:
            return Document(True)
        return Document.parse(self.body)

    def __repr__(self) -> str:
        return f"<Response [{self.status_code}] {self.method} {self.uri}>"
