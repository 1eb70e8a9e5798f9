"""Unit tests for user operations."""

from collections.abc import Callable
from urllib.parse import parse_qs

import httpx
import pytest
import respx

from gitlab_rest import Client, Conflict, Document
from tests.conftest import ENDPOINT


class TestUsers:
    """Tests for listing and fetching users."""

    def test_users(self, client: Client, stub: Callable[..., respx.Route]) -> None:
        """Test listing users returns the parsed array."""
        stub("GET", "/users", "users")

        users = client.users()

        assert isinstance(users, Document)
        assert users[0]["email"].as_str() == "john@example.com"

    def test_users_with_params(self, client: Client, stub: Callable[..., respx.Route]) -> None:
        """Test that params are sent as a query string."""
        route = stub("GET", "/users", "users")

        client.users({"per_page": 2, "active": True})

        assert dict(route.calls.last.request.url.params) == {"per_page": "2", "active": "true"}

    def test_users_with_list_params(self, client: Client, stub: Callable[..., respx.Route]) -> None:
        """Test that a list param is expanded into repeated array params."""
        route = stub("GET", "/users", "users")

        client.users({"ids": [1, 2]})

        assert route.calls.last.request.url.params.get_list("ids[]") == ["1", "2"]

    def test_user_with_id(self, client: Client, stub: Callable[..., respx.Route]) -> None:
        """Test fetching a user by ID."""
        stub("GET", "/users/1", "user")
        assert client.user(1)["email"].as_str() == "john@example.com"

    def test_user_without_id(self, client: Client, stub: Callable[..., respx.Route]) -> None:
        """Test fetching the authenticated user."""
        stub("GET", "/user", "user")
        assert client.user()["email"].as_str() == "john@example.com"

    def test_user_search(self, client: Client, stub: Callable[..., respx.Route]) -> None:
        """Test searching users sends the search param."""
        route = stub("GET", "/users", "user_search")

        users = client.user_search("User")

        assert route.calls.last.request.url.params["search"] == "User"
        assert users[0]["id"].as_int() == 1
        assert users[-1]["id"].as_int() == 2


class TestUserWrites:
    """Tests for creating, editing, blocking and deleting users."""

    def test_create_user(self, client: Client, stub: Callable[..., respx.Route]) -> None:
        """Test creating a user posts a form body."""
        route = stub("POST", "/users", "user")

        user = client.create_user("email", "pass", "username", {"name": "John"})

        body = parse_qs(route.calls.last.request.content.decode())
        assert body == {"email": ["email"], "password": ["pass"], "username": ["username"], "name": ["John"]}
        assert user["email"].as_str() == "john@example.com"

    def test_create_user_conflict(self, client: Client, stub: Callable[..., respx.Route]) -> None:
        """Test that a 409 response raises Conflict with the server message."""
        stub("POST", "/users", "error_already_exists", 409)

        with pytest.raises(Conflict) as exc_info:
            client.create_user("email", "pass", "username")

        assert str(exc_info.value) == (
            f"Server responded with code 409, message: 409 Already exists. Request URI: {client.endpoint}/users"
        )

    def test_edit_user(self, client: Client, stub: Callable[..., respx.Route]) -> None:
        """Test editing a user sends a PUT with params."""
        route = stub("PUT", "/users/1", "user")

        user = client.edit_user(1, {"name": "Roberto"})

        assert route.calls.last.request.url.params["name"] == "Roberto"
        assert user["email"].as_str() == "john@example.com"

    def test_delete_user(self, client: Client, stub: Callable[..., respx.Route]) -> None:
        """Test deleting a user sends a DELETE."""
        route = stub("DELETE", "/users/1", "user")

        user = client.delete_user(1)

        assert route.called
        assert user["email"].as_str() == "john@example.com"

    def test_block_user(self, client: Client, stub: Callable[..., respx.Route]) -> None:
        """Test blocking a user returns a bool."""
        stub("PUT", "/users/1/block", "user_block_unblock")
        assert client.block_user(1) is True

    def test_unblock_user(self, client: Client, stub: Callable[..., respx.Route]) -> None:
        """Test unblocking a user returns a bool."""
        stub("PUT", "/users/1/unblock", "user_block_unblock")
        assert client.unblock_user(1) is True


class TestSshKeys:
    """Tests for SSH key operations."""

    def test_ssh_keys_with_user_id(self, client: Client, stub: Callable[..., respx.Route]) -> None:
        stub("GET", "/users/1/keys", "keys")
        assert client.ssh_keys(1)[0]["title"].as_str() == "narkoz@helium"

    def test_ssh_keys_without_user_id(self, client: Client, stub: Callable[..., respx.Route]) -> None:
        stub("GET", "/user/keys", "keys")
        assert client.ssh_keys()[0]["title"].as_str() == "narkoz@helium"

    def test_ssh_key(self, client: Client, stub: Callable[..., respx.Route]) -> None:
        stub("GET", "/user/keys/1", "key")
        assert client.ssh_key(1)["title"].as_str() == "narkoz@helium"

    def test_create_ssh_key(self, client: Client, stub: Callable[..., respx.Route]) -> None:
        """Test creating a key for the authenticated user."""
        route = stub("POST", "/user/keys", "key")

        key = client.create_ssh_key("title", "body")

        assert parse_qs(route.calls.last.request.content.decode()) == {"title": ["title"], "key": ["body"]}
        assert key["title"].as_str() == "narkoz@helium"

    def test_create_ssh_key_for_user(self, client: Client, stub: Callable[..., respx.Route]) -> None:
        stub("POST", "/users/2/keys", "key")
        assert client.create_ssh_key("title", "body", 2)["id"].as_int() == 1

    def test_delete_ssh_key(self, client: Client, stub: Callable[..., respx.Route]) -> None:
        stub("DELETE", "/user/keys/1", "key")
        assert client.delete_ssh_key(1)["title"].as_str() == "narkoz@helium"

    def test_delete_ssh_key_for_user(self, client: Client, stub: Callable[..., respx.Route]) -> None:
        stub("DELETE", "/users/2/keys/1", "key")
        assert client.delete_ssh_key(1, 2)["title"].as_str() == "narkoz@helium"


class TestEmails:
    """Tests for email operations."""

    def test_emails_without_user_id(self, client: Client, stub: Callable[..., respx.Route]) -> None:
        stub("GET", "/user/emails", "user_emails")

        emails = client.emails()

        assert emails[0]["id"].as_int() == 1
        assert emails[0]["email"].as_str() == "email@example.com"

    def test_emails_with_user_id(self, client: Client, stub: Callable[..., respx.Route]) -> None:
        stub("GET", "/users/2/emails", "user_emails")
        assert client.emails(2)[0]["email"].as_str() == "email@example.com"

    def test_email(self, client: Client, stub: Callable[..., respx.Route]) -> None:
        stub("GET", "/user/emails/1", "user_email")
        assert client.email(1)["email"].as_str() == "email@example.com"

    def test_add_email_without_user_id(self, client: Client, stub: Callable[..., respx.Route]) -> None:
        route = stub("POST", "/user/emails", "user_email")

        email = client.add_email("email@example.com")

        assert parse_qs(route.calls.last.request.content.decode()) == {"email": ["email@example.com"]}
        assert email["id"].as_int() == 1

    def test_add_email_with_user_id(self, client: Client, stub: Callable[..., respx.Route]) -> None:
        stub("POST", "/users/2/emails", "user_email")
        assert client.add_email("email@example.com", 2)["email"].as_str() == "email@example.com"

    def test_delete_email_without_user_id(self, client: Client, stub: Callable[..., respx.Route]) -> None:
        stub("DELETE", "/user/emails/1", "user_email")
        assert client.delete_email(1)

    def test_delete_email_with_user_id(self, client: Client, stub: Callable[..., respx.Route]) -> None:
        """Test deleting another user's email hits /users/:user_id/emails/:id."""
        route = stub("DELETE", "/users/2/emails/1", "user_email")

        assert client.delete_email(1, 2)
        assert route.calls.last.request.url == f"{ENDPOINT}/users/2/emails/1"

    def test_delete_email_no_content(self, client: Client, mocked_api: respx.MockRouter) -> None:
        """Test that a 204 No Content reply to a delete counts as success."""
        mocked_api.delete(f"{ENDPOINT}/users/2/emails/1").mock(return_value=httpx.Response(204))

        result = client.delete_email(1, 2)

        assert result
        assert result.as_bool() is True
