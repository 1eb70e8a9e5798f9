"""User client.

See https://docs.gitlab.com/ee/api/users.html
"""

import logging

from gitlab_rest.client.base import BaseResource, Params
from gitlab_rest.document import Document

logger = logging.getLogger(__name__)


class UsersClient(BaseResource):
    """Operations on users, their SSH keys and their emails."""

    def users(self, params: Params = None) -> Document:
        """Get a list of users.

        Args:
            params: Optional filters, e.g. {"page": 1, "per_page": 20, "active": True}

        Returns:
            Array of user objects

        Raises:
            HttpStatusError: If the API request fails
        """
        return self._parse(self.get("/users", params))

    def user(self, user_id: int | None = None) -> Document:
        """Get a single user, or the authenticated user when ``user_id`` is omitted.

        Args:
            user_id: ID of the user

        Returns:
            User object
        """
        if user_id is None:
            return self._parse(self.get("/user"))
        return self._parse(self.get(f"/users/{user_id}"))

    def create_user(self, email: str, password: str, username: str, params: Params = None) -> Document:
        """Create a new user. Requires an admin token.

        Args:
            email: Email address of the user
            password: Password of the user
            username: Username of the user
            params: Extra attributes such as "name", "skype", "projects_limit", "admin"

        Returns:
            The created user

        Raises:
            Conflict: If the email or username is already taken
            HttpStatusError: If creation fails for another reason
        """
        data = self._merge({"email": email, "password": password, "username": username}, params)
        logger.info(f"Creating user '{username}'")
        return self._parse(self.post("/users", data))

    def edit_user(self, user_id: int, params: Params = None) -> Document:
        """Update a user.

        Args:
            user_id: ID of the user
            params: Attributes to change, e.g. {"name": "Roberto"}

        Returns:
            The updated user
        """
        logger.info(f"Updating user {user_id}")
        return self._parse(self.put(f"/users/{user_id}", params))

    def delete_user(self, user_id: int) -> Document:
        """Delete a user. Requires an admin token.

        Returns:
            The deleted user
        """
        logger.info(f"Deleting user {user_id}")
        return self._parse(self.delete(f"/users/{user_id}"))

    def block_user(self, user_id: int) -> bool:
        """Block a user. Returns True on success."""
        logger.info(f"Blocking user {user_id}")
        return self._parse_bool(self.put(f"/users/{user_id}/block"))

    def unblock_user(self, user_id: int) -> bool:
        """Unblock a user. Returns True on success."""
        logger.info(f"Unblocking user {user_id}")
        return self._parse_bool(self.put(f"/users/{user_id}/unblock"))

    def ssh_keys(self, user_id: int | None = None) -> Document:
        """List SSH keys of a user, or of the authenticated user when ``user_id`` is omitted."""
        if user_id is None:
            return self._parse(self.get("/user/keys"))
        return self._parse(self.get(f"/users/{user_id}/keys"))

    def ssh_key(self, key_id: int) -> Document:
        """Get a single SSH key of the authenticated user."""
        return self._parse(self.get(f"/user/keys/{key_id}"))

    def create_ssh_key(self, title: str, key: str, user_id: int | None = None) -> Document:
        """Add an SSH key.

        Args:
            title: Title of the key
            key: Public key body
            user_id: Owner of the key; the authenticated user when omitted

        Returns:
            The created SSH key
        """
        data = {"title": title, "key": key}
        logger.info(f"Creating SSH key '{title}'")
        if user_id is None:
            return self._parse(self.post("/user/keys", data))
        return self._parse(self.post(f"/users/{user_id}/keys", data))

    def delete_ssh_key(self, key_id: int, user_id: int | None = None) -> Document:
        """Delete an SSH key of a user, or of the authenticated user when ``user_id`` is omitted."""
        logger.info(f"Deleting SSH key {key_id}")
        if user_id is None:
            return self._parse(self.delete(f"/user/keys/{key_id}"))
        return self._parse(self.delete(f"/users/{user_id}/keys/{key_id}"))

    def emails(self, user_id: int | None = None) -> Document:
        """List emails of a user, or of the authenticated user when ``user_id`` is omitted."""
        if user_id is None:
            return self._parse(self.get("/user/emails"))
        return self._parse(self.get(f"/users/{user_id}/emails"))

    def email(self, email_id: int) -> Document:
        """Get a single email of the authenticated user."""
        return self._parse(self.get(f"/user/emails/{email_id}"))

    def add_email(self, email: str, user_id: int | None = None) -> Document:
        """Add an email address to a user, or to the authenticated user when ``user_id`` is omitted.

        Returns:
            The created email
        """
        data = {"email": email}
        logger.info(f"Adding email '{email}'")
        if user_id is None:
            return self._parse(self.post("/user/emails", data))
        return self._parse(self.post(f"/users/{user_id}/emails", data))

    def delete_email(self, email_id: int, user_id: int | None = None) -> Document:
        """Delete an email of a user, or of the authenticated user when ``user_id`` is omitted."""
        logger.info(f"Deleting email {email_id}")
        if user_id is None:
            return self._parse(self.delete(f"/user/emails/{email_id}"))
        return self._parse(self.delete(f"/users/{user_id}/emails/{email_id}"))

    def user_search(self, query: str, params: Params = None) -> Document:
        """Search users by name, username or email.

        Args:
            query: Search term
            params: Extra filters such as "per_page"

        Returns:
            Array of matching users
        """
        return self._parse(self.get("/users", self._search(query, params)))
