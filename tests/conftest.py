"""Pytest configuration and fixtures"""
import io
import os
import sys
import tempfile

import pytest
from rich.console import Console

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.cli_interface import ProjectsApp
from core.service import ProjectService
from core.sqlite_storage import SQLiteProjectStore


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def store(temp_dir):
    """SQLite store backed by a temporary database"""
    return SQLiteProjectStore(db_path=os.path.join(temp_dir, "projects.db"))


@pytest.fixture
def service(store):
    return ProjectService(store=store)


@pytest.fixture
def make_console():
    """Factory for a console that writes plain text into a buffer"""
    def _make():
        output = io.StringIO()
        console = Console(file=output, width=200, color_system=None, highlight=False)
        return console, output
    return _make


@pytest.fixture
def run_app(service, make_console):
    """
    Run the menu over scripted input lines.

    Returns (session, output_text). End of input exits the menu.
    """
    def _run(lines, session=None):
        console, output = make_console()
        stream = io.StringIO("".join(f"{line}\n" for line in lines))
        app = ProjectsApp(service=service, console=console, stream=stream)
        result = app.process_user_selections(session)
        return result, output.getvalue()
    return _run


@pytest.fixture
def sample_project_lines():
    """Create-menu input for the 'Learn Go' project"""
    return ["1", "Learn Go", "10.00", "0.00", "3", "intro"]
