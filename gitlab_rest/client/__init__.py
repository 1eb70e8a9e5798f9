"""GitLab API client composed from resource sub-clients."""

import logging
from typing import Any

import httpx

from gitlab_rest.__about__ import __version__
from gitlab_rest.client.base import BaseResource
from gitlab_rest.client.branches import BranchesClient
from gitlab_rest.client.groups import GroupsClient
from gitlab_rest.client.projects import ProjectsClient
from gitlab_rest.client.tags import TagsClient
from gitlab_rest.client.users import UsersClient
from gitlab_rest.config import DEFAULT_TOKEN_HEADER, load_config, validate_endpoint, validate_token
from gitlab_rest.http import Request

logger = logging.getLogger(__name__)

USER_AGENT = f"gitlab-rest/{__version__}"


class Client:
    """GitLab API client.

    Each resource family lives in its own sub-client (``users_client``,
    ``groups_client``, ``tags_client``, ``projects_client``,
    ``branches_client``). Their operations are also available directly on
    the Client:

    Example:
        ```python
        client = Client("https://gitlab.example.com/api/v4", "my-token")
        client.users({"per_page": 10})
        client.create_tag(1, "1.0.0", "main")
        client.tags_client.tag(1, "1.0.0")
        ```
    """

    endpoint: str
    token: str
    request: Request

    def __init__(
        self,
        endpoint: str,
        token: str,
        *,
        token_header: str = DEFAULT_TOKEN_HEADER,
        http_client: httpx.Client | None = None,
    ):
        """Initialize GitLab API client.

        Args:
            endpoint: API base URL, e.g. "https://gitlab.com/api/v4"
            token: Personal access token sent with every request
            token_header: Header carrying the token
            http_client: Optional preconfigured httpx.Client; one is created when omitted

        Raises:
            ConfigurationError: If the endpoint or token is invalid
        """
        self.endpoint = validate_endpoint(endpoint)
        self.token = validate_token(token)
        self.request = Request({"headers": {token_header: self.token, "User-Agent": USER_AGENT}}, http_client)

        self.users_client = UsersClient(self.request, self.endpoint)
        self.groups_client = GroupsClient(self.request, self.endpoint)
        self.tags_client = TagsClient(self.request, self.endpoint)
        self.projects_client = ProjectsClient(self.request, self.endpoint)
        self.branches_client = BranchesClient(self.request, self.endpoint)

        self._operations = self._collect_operations(
            self.users_client, self.groups_client, self.tags_client, self.projects_client, self.branches_client
        )
        logger.info(f"GitLab client initialized for {self.endpoint}")

    @classmethod
    def from_env(cls, token: str | None = None, endpoint: str | None = None, **kwargs: Any) -> "Client":
        """Build a client from GITLAB_TOKEN / GITLAB_ENDPOINT / GITLAB_URL (and a .env file)."""
        config = load_config(token=token, endpoint=endpoint)
        kwargs.setdefault("token_header", config.token_header)
        return cls(config.endpoint, config.token, **kwargs)

    @staticmethod
    def _collect_operations(*resources: BaseResource) -> dict[str, BaseResource]:
        """Map each public operation name to the sub-client that implements it."""
        shared = set(dir(BaseResource))
        operations: dict[str, BaseResource] = {}
        for resource in resources:
            for name in dir(type(resource)):
                if name.startswith("_") or name in shared:
                    continue
                if name in operations:
                    raise TypeError(f"Operation {name!r} is defined by more than one resource client")
                operations[name] = resource
        return operations

    def __getattr__(self, name: str) -> Any:
        # Only called for attributes not found on the Client itself
        operations = self.__dict__.get("_operations", {})
        if name in operations:
            return getattr(operations[name], name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self.__dict__.get("_operations", {})))

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self.request.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<Client endpoint={self.endpoint!r}>"


__all__ = [
    "BranchesClient",
    "Client",
    "GroupsClient",
    "ProjectsClient",
    "TagsClient",
    "UsersClient",
]
