"""Project client."""

import logging

from gitlab_rest.client.base import BaseResource, Params
from gitlab_rest.document import Document

logger = logging.getLogger(__name__)


class ProjectsClient(BaseResource):
    """Operations on projects."""

    def projects(self, params: Params = None) -> Document:
        """List projects visible to the authenticated user.

        Args:
            params: Optional filters, e.g. {"membership": True, "owned": False}
        """
        return self._parse(self.get("/projects", params))

    def project(self, project_id: str | int) -> Document:
        """Get a single project by ID or path ("group/project")."""
        return self._parse(self.get(f"/projects/{self._encode_id(project_id)}"))

    def create_project(self, name: str, params: Params = None) -> Document:
        """Create a new project.

        Args:
            name: Name of the project
            params: Extra attributes such as "path", "namespace_id", "description", "visibility"

        Returns:
            The created project
        """
        logger.info(f"Creating project '{name}'")
        return self._parse(self.post("/projects", self._merge({"name": name}, params)))

    def edit_project(self, project_id: str | int, params: Params = None) -> Document:
        logger.info(f"Updating project {project_id}")
        return self._parse(self.put(f"/projects/{self._encode_id(project_id)}", params))

    def delete_project(self, project_id: str | int) -> Document:
        logger.info(f"Deleting project {project_id}")
        return self._parse(self.delete(f"/projects/{self._encode_id(project_id)}"))

    def project_search(self, query: str, params: Params = None) -> Document:
        """Search projects by name."""
        return self._parse(self.get("/projects", self._search(query, params)))
