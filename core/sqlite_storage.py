"""SQLite-based storage for projects"""
import sqlite3
from decimal import Decimal
from pathlib import Path
from typing import List, Optional
from contextlib import contextmanager

from core.exceptions import DbError, NotFoundError
from core.models import Project
from config import Config
from utils.logging_config import get_logger

logger = get_logger('sqlite_storage')

# Database schema version for migrations
SCHEMA_VERSION = 1


class SQLiteProjectStore:
    """
    SQLite-based record store for projects.

    Every public method runs in its own connection and transaction.
    Lookups, updates and deletes of an unknown ID raise NotFoundError;
    any sqlite3 failure is rolled back and re-raised as DbError.
    """

    def __init__(self, db_path: str = None):
        """
        Initialize SQLite storage.

        Args:
            db_path: Path to database file. Uses Config.DB_PATH if not provided.
        """
        if db_path:
            self.db_path = Path(db_path)
        else:
            self.db_path = Config.DB_PATH

        # Ensure data directory exists
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        # Initialize database
        self._init_database()

    @contextmanager
    def _get_connection(self):
        """Get database connection with proper settings."""
        conn = sqlite3.connect(
            self.db_path,
            timeout=30.0,
            isolation_level='DEFERRED'
        )
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            logger.error(f"Database error: {e}")
            raise DbError(str(e)) from e
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _init_database(self):
        """Initialize database schema."""
        with self._get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS schema_version (
                    version INTEGER PRIMARY KEY
                )
            """)

            result = conn.execute("SELECT version FROM schema_version").fetchone()
            current_version = result['version'] if result else 0

            if current_version < SCHEMA_VERSION:
                self._create_schema(conn)
                conn.execute("DELETE FROM schema_version")
                conn.execute("INSERT INTO schema_version (version) VALUES (?)", (SCHEMA_VERSION,))
                logger.info(f"Database schema updated to version {SCHEMA_VERSION}")

    def _create_schema(self, conn: sqlite3.Connection):
        """Create database tables."""
        # Hours are kept as TEXT so the two-digit scale survives the round trip
        conn.execute("""
            CREATE TABLE IF NOT EXISTS project (
                project_id INTEGER PRIMARY KEY AUTOINCREMENT,
                project_name TEXT NOT NULL,
                estimated_hours TEXT,
                actual_hours TEXT,
                difficulty INTEGER,
                notes TEXT
            )
        """)

        logger.info("Database schema created successfully")

    @staticmethod
    def _hours_to_db(value: Optional[Decimal]) -> Optional[str]:
        return str(value) if value is not None else None

    def _row_to_project(self, row: sqlite3.Row) -> Project:
        """Convert database row to Project object."""
        return Project(
            project_id=row['project_id'],
            project_name=row['project_name'],
            estimated_hours=Decimal(row['estimated_hours']) if row['estimated_hours'] is not None else None,
            actual_hours=Decimal(row['actual_hours']) if row['actual_hours'] is not None else None,
            difficulty=row['difficulty'],
            notes=row['notes']
        )

    def add(self, project: Project) -> Project:
        """Insert a new project and return it with the assigned ID."""
        with self._get_connection() as conn:
            cursor = conn.execute("""
                INSERT INTO project (project_name, estimated_hours, actual_hours, difficulty, notes)
                VALUES (?, ?, ?, ?, ?)
            """, (
                project.project_name,
                self._hours_to_db(project.estimated_hours),
                self._hours_to_db(project.actual_hours),
                project.difficulty,
                project.notes
            ))
            project_id = cursor.lastrowid

        logger.info(f"Inserted project: {project_id}", extra={'project_id': project_id})
        return project.model_copy(update={'project_id': project_id})

    def fetch_all(self) -> List[Project]:
        """Load all projects ordered by ID."""
        with self._get_connection() as conn:
            rows = conn.execute("SELECT * FROM project ORDER BY project_id").fetchall()
            return [self._row_to_project(row) for row in rows]

    def fetch_by_id(self, project_id: int) -> Project:
        """Get a project by ID."""
        with self._get_connection() as conn:
            row = conn.execute(
                "SELECT * FROM project WHERE project_id = ?",
                (project_id,)
            ).fetchone()

        if row is None:
            raise NotFoundError(project_id)
        return self._row_to_project(row)

    def update(self, project: Project):
        """Replace every column of an existing project."""
        with self._get_connection() as conn:
            cursor = conn.execute("""
                UPDATE project SET
                    project_name = ?,
                    estimated_hours = ?,
                    actual_hours = ?,
                    difficulty = ?,
                    notes = ?
                WHERE project_id = ?
            """, (
                project.project_name,
                self._hours_to_db(project.estimated_hours),
                self._hours_to_db(project.actual_hours),
                project.difficulty,
                project.notes,
                project.project_id
            ))
            if cursor.rowcount == 0:
                raise NotFoundError(project.project_id)

        logger.debug(f"Updated project: {project.project_id}")

    def delete(self, project_id: int):
        """Delete a project by ID."""
        with self._get_connection() as conn:
            cursor = conn.execute("DELETE FROM project WHERE project_id = ?", (project_id,))
            if cursor.rowcount == 0:
                raise NotFoundError(project_id)

        logger.info(f"Deleted project: {project_id}", extra={'project_id': project_id})
