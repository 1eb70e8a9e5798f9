"""Environment-based configuration helpers.

The client itself never reads the environment; scripts opt in through
``Client.from_env()`` or ``load_config()``.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from gitlab_rest.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_URL = "https://gitlab.com"
DEFAULT_TOKEN_HEADER = "PRIVATE-TOKEN"
API_PATH = "/api/v4"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for a Client."""

    endpoint: str
    token: str
    token_header: str = DEFAULT_TOKEN_HEADER


def validate_endpoint(endpoint: str) -> str:
    """Check the endpoint scheme and strip any trailing slash."""
    endpoint = endpoint.rstrip("/")
    if not endpoint.startswith(("http://", "https://")):
        logger.error(f"Invalid GitLab endpoint: {endpoint}")
        raise ConfigurationError(f"GitLab endpoint must start with http:// or https://, got: {endpoint}")
    return endpoint


def validate_token(token: str | None) -> str:
    if not token:
        logger.error("GitLab token not set")
        raise ConfigurationError("A GitLab token is required. Set GITLAB_TOKEN in your .env file or environment.")
    return token


def _api_endpoint(url: str) -> str:
    """Append the API path to a bare instance URL such as https://gitlab.com."""
    url = url.rstrip("/")
    if "/api/" in f"{url}/":
        return url
    return f"{url}{API_PATH}"


def load_config(token: str | None = None, endpoint: str | None = None, dotenv: bool = True) -> ClientConfig:
    """Build a ClientConfig from arguments, falling back to the environment.

    Reads ``GITLAB_TOKEN``, ``GITLAB_ENDPOINT`` (a full API URL) or
    ``GITLAB_URL`` (an instance URL, ``/api/v4`` is appended), and
    ``GITLAB_TOKEN_HEADER``.

    Args:
        token: Explicit token; wins over GITLAB_TOKEN
        endpoint: Explicit API endpoint; wins over the environment
        dotenv: Whether to load a .env file first

    Returns:
        Validated configuration

    Raises:
        ConfigurationError: If the token is missing or the endpoint is malformed
    """
    if dotenv:
        load_dotenv()

    token = validate_token(token or os.getenv("GITLAB_TOKEN"))
    if endpoint is None:
        endpoint = os.getenv("GITLAB_ENDPOINT") or _api_endpoint(os.getenv("GITLAB_URL") or DEFAULT_URL)
    token_header = os.getenv("GITLAB_TOKEN_HEADER") or DEFAULT_TOKEN_HEADER

    return ClientConfig(endpoint=validate_endpoint(endpoint), token=token, token_header=token_header)


def configure_logging(level: int | str = logging.INFO) -> None:
    """Send gitlab_rest log records to stderr. Intended for scripts, not library code."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("gitlab_rest").setLevel(level)
