"""Base class for resource sub-clients."""

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from gitlab_rest.document import Document
from gitlab_rest.http import Request, Response

logger = logging.getLogger(__name__)

Params = Mapping[str, Any] | None


class BaseResource:
    """Shared HTTP helpers for one family of GitLab API operations.

    Sub-clients build a path relative to the endpoint and call the verb
    helpers below, which prepend the endpoint and hand off to the shared
    Request.
    """

    endpoint: str
    request: Request

    def __init__(self, request: Request, endpoint: str):
        """Initialize a resource sub-client.

        Args:
            request: Request carrying the auth header, shared by all sub-clients
            endpoint: API base URL, e.g. "https://gitlab.com/api/v4"
        """
        self.request = request
        self.endpoint = endpoint

    @staticmethod
    def _encode_id(resource_id: str | int) -> str:
        """Encode a numeric ID or a namespaced path ("group/project") for use in a URL path."""
        if isinstance(resource_id, int):
            return str(resource_id)
        return quote(resource_id, safe="")

    def _url(self, path: str) -> str:
        return f"{self.endpoint}{path}"

    def get(self, path: str, params: Params = None) -> Response:
        return self.request.get(self._url(path), params)

    def post(self, path: str, params: Params = None) -> Response:
        return self.request.post(self._url(path), params)

    def put(self, path: str, params: Params = None) -> Response:
        return self.request.put(self._url(path), params)

    def delete(self, path: str, params: Params = None) -> Response:
        return self.request.delete(self._url(path), params)

    @staticmethod
    def _merge(required: dict[str, Any], params: Params) -> dict[str, Any]:
        """Layer caller params over the required ones."""
        return {**required, **(params or {})}

    @staticmethod
    def _search(query: str, params: Params) -> dict[str, Any]:
        return {"search": query, **(params or {})}

    @staticmethod
    def _parse(response: Response) -> Document:
        return response.json()

    @staticmethod
    def _parse_bool(response: Response) -> bool:
        return response.json().as_bool()
