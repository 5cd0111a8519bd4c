"""Project service - the layer the command loop talks to"""
from typing import List, Optional

from core.models import Project
from core.sqlite_storage import SQLiteProjectStore
from utils.logging_config import get_logger, LogTimer

logger = get_logger('service')


class ProjectService:
    """
    Thin facade over the record store.

    Usage:
        service = ProjectService()

        project = service.add_project(Project(project_name="Learn Go"))
        service.fetch_project_by_id(project.project_id)
        service.delete_project(project.project_id)
    """

    def __init__(self, store: Optional[SQLiteProjectStore] = None):
        """
        Initialize the service.

        Args:
            store: Optional record store. Uses the default SQLite store if not provided.
        """
        self._store = store or SQLiteProjectStore()

    def add_project(self, project: Project) -> Project:
        """Store a new project, returning it with its assigned ID"""
        with LogTimer(logger, f"add_project: {project.project_name}"):
            return self._store.add(project)

    def fetch_all_projects(self) -> List[Project]:
        with LogTimer(logger, "fetch_all_projects"):
            return self._store.fetch_all()

    def fetch_project_by_id(self, project_id: int) -> Project:
        """Raises NotFoundError if there is no such project"""
        with LogTimer(logger, f"fetch_project_by_id: {project_id}", project_id=project_id):
            return self._store.fetch_by_id(project_id)

    def modify_project_details(self, project: Project):
        """Full replace of an existing project. Raises NotFoundError for an unknown ID"""
        with LogTimer(logger, f"modify_project_details: {project.project_id}", project_id=project.project_id):
            self._store.update(project)

    def delete_project(self, project_id: int):
        """Raises NotFoundError for an unknown ID"""
        with LogTimer(logger, f"delete_project: {project_id}", project_id=project_id):
            self._store.delete(project_id)
