"""gitlab-rest - a thin synchronous client for the GitLab REST API.

This package provides:
- A Client exposing users, groups, tags, projects and branches operations
- Request/Response/Options HTTP primitives built on httpx
- Document, a typed wrapper around parsed JSON responses
- A typed exception per HTTP error status
"""

from gitlab_rest.__about__ import __version__
from gitlab_rest.client import (
    BranchesClient,
    Client,
    GroupsClient,
    ProjectsClient,
    TagsClient,
    UsersClient,
)
from gitlab_rest.config import ClientConfig, configure_logging, load_config
from gitlab_rest.document import Document
from gitlab_rest.errors import (
    BadGateway,
    BadRequest,
    ConfigurationError,
    Conflict,
    DocumentTypeError,
    Error,
    Forbidden,
    HttpStatusError,
    InternalServerError,
    MethodNotAllowed,
    NotFound,
    ParseError,
    ServiceUnavailable,
    TransportError,
    Unauthorized,
    Unprocessable,
    UnsupportedMethodError,
)
from gitlab_rest.http import Options, Request, Response

__all__ = [
    "__version__",
    # Client
    "Client",
    "UsersClient",
    "GroupsClient",
    "TagsClient",
    "ProjectsClient",
    "BranchesClient",
    # HTTP
    "Options",
    "Request",
    "Response",
    "Document",
    # Configuration
    "ClientConfig",
    "load_config",
    "configure_logging",
    # Exceptions
    "Error",
    "ConfigurationError",
    "TransportError",
    "ParseError",
    "UnsupportedMethodError",
    "DocumentTypeError",
    "HttpStatusError",
    "BadRequest",
    "Unauthorized",
    "Forbidden",
    "NotFound",
    "MethodNotAllowed",
    "Conflict",
    "Unprocessable",
    "InternalServerError",
    "BadGateway",
    "ServiceUnavailable",
]
