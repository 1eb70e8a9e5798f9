"""Shared test fixtures for gitlab-rest tests."""

import os
from collections.abc import Callable, Generator
from pathlib import Path

import httpx
import pytest
import respx

from gitlab_rest import Client

FIXTURES_DIR = Path(__file__).parent / "fixtures"

ENDPOINT = "https://gitlab.example.com/api/v4"
TOKEN = "test-token-12345"


def load_fixture(name: str) -> str:
    """Read a JSON fixture from tests/fixtures."""
    return (FIXTURES_DIR / f"{name}.json").read_text()


@pytest.fixture
def mocked_api() -> Generator[respx.MockRouter, None, None]:
    """Intercept all httpx traffic for the duration of a test."""
    with respx.mock(assert_all_called=True) as router:
        yield router


@pytest.fixture
def client(mocked_api: respx.MockRouter) -> Generator[Client, None, None]:
    """Client pointed at the fake endpoint."""
    with Client(ENDPOINT, TOKEN) as gitlab:
        yield gitlab


@pytest.fixture
def stub(mocked_api: respx.MockRouter) -> Callable[..., respx.Route]:
    """Register a canned response for a method and path under the endpoint.

    Usage: ``stub("GET", "/users", "users")`` or ``stub("POST", "/users", "error_already_exists", 409)``.
    """

    def _stub(method: str, path: str, fixture: str, status: int = 200) -> respx.Route:
        route = mocked_api.route(method=method, url=f"{ENDPOINT}{path}")
        route.mock(return_value=httpx.Response(status, text=load_fixture(fixture)))
        return route

    return _stub


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up test environment variables."""
    env = {
        "GITLAB_TOKEN": TOKEN,
        "GITLAB_URL": "https://gitlab.example.com",
    }
    for key in ("GITLAB_ENDPOINT", "GITLAB_TOKEN_HEADER"):
        monkeypatch.delenv(key, raising=False)
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    return env


# Integration test fixtures


@pytest.fixture
def gitlab_token() -> str | None:
    """Get GitLab token from environment for integration tests."""
    return os.getenv("GITLAB_TOKEN")


@pytest.fixture
def gitlab_endpoint() -> str:
    """Get GitLab API endpoint from environment for integration tests."""
    return os.getenv("GITLAB_ENDPOINT", "https://gitlab.com/api/v4")


@pytest.fixture
def skip_without_token(gitlab_token: str | None) -> None:
    """Skip test if GITLAB_TOKEN is not set."""
    if not gitlab_token:
        pytest.skip("GITLAB_TOKEN not set - skipping integration test")
