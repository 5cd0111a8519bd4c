"""Core module for Projects"""
from core.exceptions import ProjectsError, InputConversionError, NotFoundError, DbError
from core.models import Project, merge_project
from core.sqlite_storage import SQLiteProjectStore
from core.service import ProjectService

__all__ = [
    # Errors
    'ProjectsError',
    'InputConversionError',
    'NotFoundError',
    'DbError',
    # Models
    'Project',
    'merge_project',
    # Storage
    'SQLiteProjectStore',
    # Service
    'ProjectService',
]
