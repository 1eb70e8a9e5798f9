"""Group client.

See https://docs.gitlab.com/ee/api/groups.html and
https://docs.gitlab.com/ee/api/members.html
"""

import logging

from gitlab_rest.client.base import BaseResource, Params
from gitlab_rest.document import Document

logger = logging.getLogger(__name__)


class GroupsClient(BaseResource):
    """Operations on groups and group members.

    ``group_id`` accepts a numeric ID or a full path such as "parent/child".
    """

    def groups(self, params: Params = None) -> Document:
        """List groups visible to the authenticated user.

        Args:
            params: Optional filters, e.g. {"owned": True, "per_page": 50}
        """
        return self._parse(self.get("/groups", params))

    def group(self, group_id: str | int) -> Document:
        """Get a single group, including its projects."""
        return self._parse(self.get(f"/groups/{self._encode_id(group_id)}"))

    def create_group(self, name: str, path: str, params: Params = None) -> Document:
        """Create a new group.

        Args:
            name: Name of the group
            path: URL path of the group
            params: Extra attributes such as "description", "visibility", "parent_id"

        Returns:
            The created group
        """
        logger.info(f"Creating group '{name}' at path '{path}'")
        return self._parse(self.post("/groups", self._merge({"name": name, "path": path}, params)))

    def edit_group(self, group_id: str | int, params: Params = None) -> Document:
        logger.info(f"Updating group {group_id}")
        return self._parse(self.put(f"/groups/{self._encode_id(group_id)}", params))

    def delete_group(self, group_id: str | int) -> Document:
        logger.info(f"Deleting group {group_id}")
        return self._parse(self.delete(f"/groups/{self._encode_id(group_id)}"))

    def group_projects(self, group_id: str | int, params: Params = None) -> Document:
        """List the projects of a group."""
        return self._parse(self.get(f"/groups/{self._encode_id(group_id)}/projects", params))

    def transfer_project_to_group(self, group_id: str | int, project_id: str | int) -> Document:
        """Move a project into a group. Requires an admin token.

        Returns:
            The group the project now belongs to
        """
        logger.info(f"Transferring project {project_id} to group {group_id}")
        path = f"/groups/{self._encode_id(group_id)}/projects/{self._encode_id(project_id)}"
        return self._parse(self.post(path))

    def search_groups(self, query: str, params: Params = None) -> Document:
        """Search groups by name or path."""
        return self._parse(self.get("/groups", self._search(query, params)))

    def group_members(self, group_id: str | int, params: Params = None) -> Document:
        """List the members of a group.

        Args:
            group_id: Group ID or path
            params: Optional filters, e.g. {"query": "john"}
        """
        return self._parse(self.get(f"/groups/{self._encode_id(group_id)}/members", params))

    def group_member(self, group_id: str | int, user_id: int) -> Document:
        return self._parse(self.get(f"/groups/{self._encode_id(group_id)}/members/{user_id}"))

    def add_group_member(self, group_id: str | int, user_id: int, access_level: int) -> Document:
        """Add a user to a group.

        Args:
            group_id: Group ID or path
            user_id: ID of the user to add
            access_level: 10 guest, 20 reporter, 30 developer, 40 maintainer, 50 owner

        Returns:
            The new membership
        """
        logger.info(f"Adding user {user_id} to group {group_id} with access level {access_level}")
        data = {"user_id": user_id, "access_level": access_level}
        return self._parse(self.post(f"/groups/{self._encode_id(group_id)}/members", data))

    def edit_group_member(self, group_id: str | int, user_id: int, access_level: int) -> Document:
        """Change the access level of a group member."""
        logger.info(f"Setting access level {access_level} for user {user_id} in group {group_id}")
        path = f"/groups/{self._encode_id(group_id)}/members/{user_id}"
        return self._parse(self.put(path, {"access_level": access_level}))

    def remove_group_member(self, group_id: str | int, user_id: int) -> Document:
        logger.info(f"Removing user {user_id} from group {group_id}")
        return self._parse(self.delete(f"/groups/{self._encode_id(group_id)}/members/{user_id}"))
