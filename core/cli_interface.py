"""CLI интерфейс для Projects"""
from dataclasses import dataclass
from typing import Optional, TextIO

import click
from rich.console import Console
from rich.markup import escape

from core.exceptions import InputConversionError, NotFoundError
from core.models import Project, merge_project
from core.prompts import Prompter
from core.service import ProjectService
from utils.logging_config import get_logger

logger = get_logger('cli')

EXIT = -1

OPERATIONS = [
    "1) Add a project",
    "2) List projects",
    "3) Select a project",
    "4) Update project details",
    "5) Delete a project",
]


@dataclass
class Session:
    """Состояние сессии: текущий выбранный проект"""
    current_project: Optional[Project] = None


class ProjectsApp:
    """
    Interactive menu over the project service.

    Every handler receives the session explicitly. Errors raised by a handler
    are caught once, in process_user_selections, and the loop continues.
    """

    def __init__(
        self,
        service: Optional[ProjectService] = None,
        console: Optional[Console] = None,
        stream: Optional[TextIO] = None,
    ):
        self.service = service or ProjectService()
        self.console = console or Console()
        self.prompt = Prompter(self.console, stream)

    def process_user_selections(self, session: Optional[Session] = None) -> Session:
        """Run the menu until the user exits. Returns the final session"""
        if session is None:
            session = Session()

        handlers = {
            1: self.create_project,
            2: self.list_projects,
            3: self.select_project,
            4: self.update_project_details,
            5: self.delete_project,
        }

        done = False
        while not done:
            try:
                selection = self.get_user_selection(session)

                if selection == EXIT:
                    done = self.exit_menu()
                elif selection in handlers:
                    handlers[selection](session)
                else:
                    self.console.print(f"\n{selection} is not a valid selection, please try again.")

            except InputConversionError as e:
                logger.warning(f"Invalid input '{e.text}': {e}", exc_info=True)
                self._print_error(e)
            except NotFoundError as e:
                logger.warning(f"Project not found: {e.project_id}", exc_info=True,
                               extra={'project_id': e.project_id})
                self._print_error(e)
            except Exception as e:
                logger.error(f"Unexpected error: {e}", exc_info=True)
                self._print_error(e)

        return session

    def _print_error(self, error: Exception):
        self.console.print(f"\n[red]Error: {escape(str(error))}[/red]")

    def get_user_selection(self, session: Session) -> int:
        self.print_operations(session)
        selection = self.prompt.integer("Enter a menu selection")
        return EXIT if selection is None else selection

    def print_operations(self, session: Session):
        self.console.print("\nThese are the available selections. Press the Enter key to quit:")
        for line in OPERATIONS:
            self.console.print(f"   {line}")

        if session.current_project is None:
            self.console.print("\nYou are not working with a project.")
        else:
            self.console.print(f"\nYou are working with project: {escape(str(session.current_project))}")

    def exit_menu(self) -> bool:
        self.console.print("Exiting the menu. Goodbye.")
        return True

    def create_project(self, session: Session):
        """Добавить проект"""
        project = Project(
            project_name=self.prompt.text("Enter the project name"),
            estimated_hours=self.prompt.decimal("Enter the estimated length of project, in hours"),
            actual_hours=self.prompt.decimal("Enter the actual length of the project, in hours"),
            difficulty=self.prompt.integer("Enter the difficulty level (1-5)"),
            notes=self.prompt.text("Enter any projects notes you may have"),
        )

        db_project = self.service.add_project(project)
        self.console.print(f"[green]You have successfully created project: {escape(str(db_project))}[/green]")

    def list_projects(self, session: Session):
        """Показать все проекты"""
        projects = self.service.fetch_all_projects()

        self.console.print("\nProjects:")
        for project in projects:
            self.console.print(f"   {project.project_id}: {escape(str(project.project_name))}")

    def select_project(self, session: Session):
        """Выбрать проект для редактирования"""
        self.list_projects(session)
        project_id = self.prompt.integer("Enter a project ID to select project")

        # Снимаем текущий выбор до поиска: при ошибке проект остается не выбран
        session.current_project = None
        session.current_project = self.service.fetch_project_by_id(project_id)

    def update_project_details(self, session: Session):
        """Обновить выбранный проект. Пустой ввод оставляет прежнее значение"""
        current = session.current_project
        if current is None:
            self.console.print("\nPlease select a project.")
            return

        project = merge_project(
            current,
            project_name=self.prompt.text(f"Enter the project name [{current.project_name}]"),
            estimated_hours=self.prompt.decimal(
                f"Enter the new estimated hours of the project [{current.estimated_hours}]"),
            actual_hours=self.prompt.decimal(
                f"Enter the new actual hours of the project [{current.actual_hours}]"),
            difficulty=self.prompt.integer(f"Enter the new difficulty (1-5) [{current.difficulty}]"),
            notes=self.prompt.text(f"Update notes? [{current.notes}]"),
        )

        self.service.modify_project_details(project)
        session.current_project = self.service.fetch_project_by_id(current.project_id)

    def delete_project(self, session: Session):
        """Удалить проект"""
        self.list_projects(session)
        project_id = self.prompt.integer("Enter the ID for the project to delete")

        self.service.delete_project(project_id)
        self.console.print(f"[green]project {project_id} was successfully deleted.[/green]")

        if session.current_project is not None and session.current_project.project_id == project_id:
            session.current_project = None


@click.command()
def cli():
    """Projects - управление проектами через текстовое меню"""
    ProjectsApp().process_user_selections()

