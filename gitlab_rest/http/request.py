"""HTTP request primitives."""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from gitlab_rest.errors import TransportError, UnsupportedMethodError
from gitlab_rest.http.options import Options
from gitlab_rest.http.response import Response

logger = logging.getLogger(__name__)

ALLOWED_METHODS = ("GET", "POST", "PUT", "DELETE")


class Request:
    """Sends GET/POST/PUT/DELETE calls with a set of default options.

    Call-time params and headers are merged over the defaults for every call.

    Example:
        ```python
        request = Request({"headers": {"User-Agent": "gitlab-rest"}, "params": {"source": "app"}})
        request.get("https://gitlab.example.com/api/v4/users")
        request.request("post", "https://gitlab.example.com/api/v4/groups", params={"name": "dev"})
        ```
    """

    default_options: Options
    client: httpx.Client

    def __init__(self, options: Mapping[str, Any] | None = None, client: httpx.Client | None = None) -> None:
        self.default_options = Options(options)
        self._owns_client = client is None
        self.client = client if client is not None else httpx.Client()

    def close(self) -> None:
        """Close the underlying HTTP client if this Request created it."""
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "Request":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _options(self, params: Mapping[str, Any] | None, headers: Mapping[str, Any] | None) -> Options:
        return self.default_options.merge({"params": params, "headers": headers})

    @staticmethod
    def _with_query(uri: httpx.URL, options: Options) -> httpx.URL:
        """Append the serialised params to any query string already on ``uri``."""
        query = options.query_string()
        if not query:
            return uri
        existing = uri.query.decode("ascii")
        combined = "&".join(part for part in (existing, query) if part)
        return uri.copy_with(query=combined.encode("ascii"))

    def _send(self, method: str, uri: httpx.URL, options: Options, form: bool = False) -> Response:
        try:
            logger.debug(f"{method} {uri} with params={options.params}")
            if form:
                raw = self.client.request(method, uri, data=options.params, headers=options.headers)
            else:
                raw = self.client.request(method, uri, headers=options.headers)
        except httpx.RequestError as e:
            logger.error(f"Network error for {method} {uri}: {e}")
            raise TransportError(f"{method} {uri} failed: {e}") from e
        return Response.parse(raw, method, uri)

    def get(
        self, uri: str | httpx.URL, params: Mapping[str, Any] | None = None, headers: Mapping[str, Any] | None = None
    ) -> Response:
        """Send a GET request; params go into the query string."""
        options = self._options(params, headers)
        return self._send("GET", self._with_query(httpx.URL(uri), options), options)

    def post(
        self, uri: str | httpx.URL, params: Mapping[str, Any] | None = None, headers: Mapping[str, Any] | None = None
    ) -> Response:
        """Send a POST request; params go into a form-encoded body."""
        options = self._options(params, headers)
        return self._send("POST", httpx.URL(uri), options, form=True)

    def put(
        self, uri: str | httpx.URL, params: Mapping[str, Any] | None = None, headers: Mapping[str, Any] | None = None
    ) -> Response:
        """Send a PUT request; params go into the query string."""
        options = self._options(params, headers)
        return self._send("PUT", self._with_query(httpx.URL(uri), options), options)

    def delete(
        self, uri: str | httpx.URL, params: Mapping[str, Any] | None = None, headers: Mapping[str, Any] | None = None
    ) -> Response:
        """Send a DELETE request; params go into the query string."""
        options = self._options(params, headers)
        return self._send("DELETE", self._with_query(httpx.URL(uri), options), options)

    def request(
        self,
        method: str,
        url: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, Any] | None = None,
    ) -> Response:
        """Dispatch to the verb method matching ``method``.

        Args:
            method: One of GET, POST, PUT or DELETE (case-insensitive)
            url: Fully-qualified request URL
            params: Call-time params merged over the defaults
            headers: Call-time headers merged over the defaults

        Returns:
            Response for a 2xx status

        Raises:
            UnsupportedMethodError: If ``method`` is not one of the allowed verbs
            HttpStatusError: If the server answers with a non-2xx status
            TransportError: If the request could not be sent
        """
        verb = str(method).upper()
        if verb not in ALLOWED_METHODS:
            logger.error(f"Rejected unsupported HTTP method {method!r} for {url}")
            raise UnsupportedMethodError("GET/PUT/POST/DELETE is allowed")

        uri = httpx.URL(url)
        if verb == "GET":
            return self.get(uri, params, headers)
        if verb == "POST":
            return self.post(uri, params, headers)
        if verb == "PUT":
            return self.put(uri, params, headers)
        return self.delete(uri, params, headers)
