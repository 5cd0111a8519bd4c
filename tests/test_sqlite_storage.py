"""Unit tests for core/sqlite_storage.py"""
import os
import sqlite3
from decimal import Decimal

import pytest

from core.exceptions import DbError, NotFoundError
from core.models import Project
from core.sqlite_storage import SQLiteProjectStore


def make_project(name="Learn Go", **kwargs):
    fields = dict(
        project_name=name,
        estimated_hours=Decimal("10.00"),
        actual_hours=Decimal("0.00"),
        difficulty=3,
        notes="intro"
    )
    fields.update(kwargs)
    return Project(**fields)


class TestSQLiteProjectStore:
    """Tests for SQLiteProjectStore class"""

    def test_init_creates_database(self, temp_dir):
        """Initialization creates the data directory and the database file"""
        db_path = os.path.join(temp_dir, "nested", "projects.db")
        SQLiteProjectStore(db_path=db_path)
        assert os.path.exists(db_path)

    def test_init_is_idempotent(self, temp_dir):
        """Opening an existing database keeps its data"""
        db_path = os.path.join(temp_dir, "projects.db")
        SQLiteProjectStore(db_path=db_path).add(make_project())

        reopened = SQLiteProjectStore(db_path=db_path)
        assert len(reopened.fetch_all()) == 1

    def test_add_assigns_id(self, store):
        project = store.add(make_project())
        assert project.project_id == 1
        assert project.project_name == "Learn Go"

    def test_add_does_not_mutate_input(self, store):
        project = make_project()
        store.add(project)
        assert project.project_id is None

    def test_round_trip_keeps_fields(self, store):
        """Fetched project equals the submitted fields"""
        submitted = make_project()
        created = store.add(submitted)

        fetched = store.fetch_by_id(created.project_id)
        assert fetched == submitted.model_copy(update={'project_id': created.project_id})
        assert str(fetched.actual_hours) == "0.00"

    def test_round_trip_with_absent_fields(self, store):
        created = store.add(Project(project_name="Bare"))
        fetched = store.fetch_by_id(created.project_id)

        assert fetched.estimated_hours is None
        assert fetched.actual_hours is None
        assert fetched.difficulty is None
        assert fetched.notes is None

    def test_fetch_all_in_id_order(self, store):
        for name in ["A", "B", "C"]:
            store.add(make_project(name))

        projects = store.fetch_all()
        assert [p.project_id for p in projects] == [1, 2, 3]
        assert [p.project_name for p in projects] == ["A", "B", "C"]

    def test_fetch_all_empty(self, store):
        assert store.fetch_all() == []

    def test_fetch_by_id_not_found(self, store):
        with pytest.raises(NotFoundError) as exc_info:
            store.fetch_by_id(99)
        assert exc_info.value.project_id == 99
        assert str(exc_info.value) == "Project with ID=99 does not exist."

    def test_update_replaces_fields(self, store):
        created = store.add(make_project())
        store.update(created.model_copy(update={'project_name': "Learn Rust", 'notes': None}))

        fetched = store.fetch_by_id(created.project_id)
        assert fetched.project_name == "Learn Rust"
        assert fetched.notes is None
        assert fetched.difficulty == 3

    def test_update_not_found(self, store):
        with pytest.raises(NotFoundError):
            store.update(make_project(project_id=5))

    def test_delete(self, store):
        first = store.add(make_project("A"))
        second = store.add(make_project("B"))

        store.delete(first.project_id)

        assert [p.project_id for p in store.fetch_all()] == [second.project_id]

    def test_delete_not_found(self, store):
        with pytest.raises(NotFoundError):
            store.delete(1)

    def test_ids_are_not_reused(self, store):
        """A deleted ID is never handed out again"""
        created = store.add(make_project("A"))
        store.delete(created.project_id)

        again = store.add(make_project("B"))
        assert again.project_id == created.project_id + 1


class TestSQLiteProjectStoreErrors:
    """Database failures surface as DbError"""

    def test_missing_name_raises_db_error(self, store):
        with pytest.raises(DbError) as exc_info:
            store.add(Project(notes="no name"))
        assert isinstance(exc_info.value.__cause__, sqlite3.IntegrityError)

    def test_failed_insert_is_rolled_back(self, store):
        with pytest.raises(DbError):
            store.add(Project())
        assert store.fetch_all() == []
