"""Tag client.

See https://docs.gitlab.com/ee/api/tags.html
"""

import logging
from urllib.parse import quote

from gitlab_rest.client.base import BaseResource, Params
from gitlab_rest.document import Document

logger = logging.getLogger(__name__)


class TagsClient(BaseResource):
    """Operations on repository tags and their release notes."""

    def _tags_path(self, project_id: str | int, tag: str | None = None) -> str:
        path = f"/projects/{self._encode_id(project_id)}/repository/tags"
        if tag is not None:
            # Tag names may contain slashes
            path = f"{path}/{quote(tag, safe='')}"
        return path

    def tags(self, project_id: str | int, params: Params = None) -> Document:
        """List the tags of a project.

        Args:
            project_id: Project ID or path
            params: Optional params such as "page" and "per_page" (default 20)

        Returns:
            Array of tags
        """
        return self._parse(self.get(self._tags_path(project_id), params))

    def tag(self, project_id: str | int, tag: str) -> Document:
        """Get a single tag by name."""
        return self._parse(self.get(self._tags_path(project_id, tag)))

    def create_tag(self, project_id: str | int, tag: str, ref: str, params: Params = None) -> Document:
        """Create a tag.

        Args:
            project_id: Project ID or path
            tag: Name of the new tag
            ref: Commit SHA, branch or existing tag to tag
            params: Optional "message" (makes an annotated tag) and "release_description"

        Returns:
            The created tag
        """
        logger.info(f"Creating tag '{tag}' from '{ref}' in project {project_id}")
        data = self._merge({"tag_name": tag, "ref": ref}, params)
        return self._parse(self.post(self._tags_path(project_id), data))

    def delete_tag(self, project_id: str | int, tag: str) -> Document:
        """Delete a tag."""
        logger.info(f"Deleting tag '{tag}' in project {project_id}")
        return self._parse(self.delete(self._tags_path(project_id, tag)))

    def create_release_notes(self, project_id: str | int, tag: str, description: str) -> Document:
        """Attach Markdown release notes to an existing tag.

        Returns:
            The created release
        """
        logger.info(f"Creating release notes for tag '{tag}' in project {project_id}")
        path = f"{self._tags_path(project_id, tag)}/release"
        return self._parse(self.post(path, {"description": description}))

    def update_release_notes(self, project_id: str | int, tag: str, description: str) -> Document:
        """Replace the release notes of a tag.

        Returns:
            The updated release
        """
        logger.info(f"Updating release notes for tag '{tag}' in project {project_id}")
        path = f"{self._tags_path(project_id, tag)}/release"
        return self._parse(self.put(path, {"description": description}))
