"""Error kinds raised by the Projects app"""
from typing import Optional


class ProjectsError(Exception):
    """Base class for all application errors"""


class InputConversionError(ProjectsError):
    """User text could not be converted to the expected type"""

    def __init__(self, text: str, message: str):
        super().__init__(message)
        self.text = text


class NotFoundError(ProjectsError):
    """No project with the given ID exists in the store"""

    def __init__(self, project_id: Optional[int]):
        super().__init__(f"Project with ID={project_id} does not exist.")
        self.project_id = project_id


class DbError(ProjectsError):
    """Underlying database failure"""
