"""
services/project_service.py
---------------------------
Business logic for DIY projects.
The operations are simple enough that this layer mostly passes calls
through to the ProjectRepository; it is where "not found" becomes an error.
"""

from typing import Optional

from db.errors import PersistenceError
from models.project import Project
from repositories.project_repo import ProjectRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class ProjectNotFoundError(LookupError):
    """Raised when a project ID does not match any row."""


class ProjectService:
    """Pass-through between the console input layer and the repository."""

    def __init__(self, repo: Optional[ProjectRepository] = None):
        self.repo = repo or ProjectRepository()

    def add_project(self, project: Project) -> Project:
        """Insert a project and return it with its new ID."""
        return self.repo.insert_project(project)

    def fetch_all_projects(self) -> list[Project]:
        """All projects, without materials, steps or categories."""
        return self.repo.fetch_all_projects()

    def fetch_project_by_id(self, project_id: int) -> Project:
        """
        Fetch a project with all of its details.

        Raises:
            ProjectNotFoundError: If no project has the given ID.
        """
        project = self.repo.fetch_project_by_id(project_id)
        if project is None:
            raise ProjectNotFoundError(f"Project with project ID={project_id} does not exist.")
        return project

    def modify_project_details(self, project: Project) -> None:
        """
        Overwrite a project's details.

        Raises:
            PersistenceError: If the project ID does not exist.
        """
        if not self.repo.modify_project_details(project):
            logger.warning(f"Update skipped, project #{project.project_id} not found")
            raise PersistenceError(f"Project with ID={project.project_id} does not exist.")

    def delete_project(self, project_id: int) -> None:
        """
        Delete a project and everything that belongs to it.

        Raises:
            PersistenceError: If the project ID does not exist.
        """
        if not self.repo.delete_project(project_id):
            logger.warning(f"Delete skipped, project #{project_id} not found")
            raise PersistenceError(f"Project with ID={project_id} does not exist.")
