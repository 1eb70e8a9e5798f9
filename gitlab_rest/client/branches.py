"""Repository branch client."""

import logging
from urllib.parse import quote

from gitlab_rest.client.base import BaseResource, Params
from gitlab_rest.document import Document

logger = logging.getLogger(__name__)


class BranchesClient(BaseResource):
    """Operations on repository branches."""

    def _branches_path(self, project_id: str | int, branch: str | None = None) -> str:
        path = f"/projects/{self._encode_id(project_id)}/repository/branches"
        if branch is not None:
            path = f"{path}/{quote(branch, safe='')}"
        return path

    def branches(self, project_id: str | int, params: Params = None) -> Document:
        return self._parse(self.get(self._branches_path(project_id), params))

    def branch(self, project_id: str | int, branch: str) -> Document:
        return self._parse(self.get(self._branches_path(project_id, branch)))

    def create_branch(self, project_id: str | int, branch: str, ref: str) -> Document:
        """Create a branch from a commit SHA, branch or tag.

        Returns:
            The created branch
        """
        logger.info(f"Creating branch '{branch}' from '{ref}' in project {project_id}")
        return self._parse(self.post(self._branches_path(project_id), {"branch": branch, "ref": ref}))

    def delete_branch(self, project_id: str | int, branch: str) -> Document:
        logger.info(f"Deleting branch '{branch}' in project {project_id}")
        return self._parse(self.delete(self._branches_path(project_id, branch)))

    def protect_branch(self, project_id: str | int, branch: str, params: Params = None) -> Document:
        """Protect a branch.

        Args:
            project_id: Project ID or path
            branch: Branch name
            params: Optional "developers_can_push" and "developers_can_merge" flags
        """
        logger.info(f"Protecting branch '{branch}' in project {project_id}")
        return self._parse(self.put(f"{self._branches_path(project_id, branch)}/protect", params))

    def unprotect_branch(self, project_id: str | int, branch: str) -> Document:
        logger.info(f"Unprotecting branch '{branch}' in project {project_id}")
        return self._parse(self.put(f"{self._branches_path(project_id, branch)}/unprotect"))
