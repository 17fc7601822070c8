"""
main.py
-------
Entry point for the DIY projects console application.

Responsibilities:
    - Initialize the database connection pool and schema.
    - Run the menu loop that reads user input and calls the ProjectService.
    - Close the pool on exit.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional

from db.connection import init_pool, close_pool
from db.init_db import create_tables, seed_categories
from models.project import Project
from services.project_service import ProjectService
from utils.logger import get_logger

logger = get_logger(__name__)

OPERATIONS = [
    "1) Add a project",
    "2) List projects",
    "3) Select a project",
    "4) Update project details",
    "5) Delete a project",
]


class ProjectsApp:
    """Menu-driven input layer. Holds the currently selected project."""

    def __init__(self, service: Optional[ProjectService] = None):
        self.service = service or ProjectService()
        self.cur_project: Optional[Project] = None

    def process_user_selections(self) -> None:
        """Show the menu until the user presses Enter on an empty line."""
        done = False
        while not done:
            try:
                selection = self.get_user_selection()
                if selection == -1:
                    done = self.exit_menu()
                elif selection == 1:
                    self.create_project()
                elif selection == 2:
                    self.list_projects()
                elif selection == 3:
                    self.select_project()
                elif selection == 4:
                    self.update_project_details()
                elif selection == 5:
                    self.delete_project()
                else:
                    print(f"\n{selection} is not a valid selection. Try again.")
            except Exception as e:
                logger.debug(f"Menu operation failed: {e!r}")
                print(f"\nError: {e} Try again.")

    # ── Operations ────────────────────────────────────────

    def create_project(self) -> None:
        project_name = self.get_string_input("Enter the project name")
        estimated_hours = self.get_decimal_input("Enter the estimated hours")
        actual_hours = self.get_decimal_input("Enter the actual hours")
        difficulty = self.get_int_input("Enter the project difficulty (1-5)")
        notes = self.get_string_input("Enter the project notes")

        if project_name is None:
            raise ValueError("Project name is required.")

        project = Project(
            project_name=project_name,
            estimated_hours=estimated_hours,
            actual_hours=actual_hours,
            difficulty=difficulty,
            notes=notes,
        )
        db_project = self.service.add_project(project)
        print(f"You have successfully created project: {db_project.project_id} {db_project.project_name}")

    def list_projects(self) -> list[Project]:
        projects = self.service.fetch_all_projects()
        print("\nProjects:")
        for p in projects:
            print(f"   {p.project_id}: {p.project_name}")
        return projects

    def select_project(self) -> None:
        self.list_projects()
        project_id = self.get_project_id_input("Enter a project ID to select a project")

        # Unselect first so a failed lookup leaves nothing selected.
        self.cur_project = None
        self.cur_project = self.service.fetch_project_by_id(project_id)

    def update_project_details(self) -> None:
        if self.cur_project is None:
            print("\nPlease select a project.")
            return

        cur = self.cur_project
        project_name = self.get_string_input(f"Enter the project name [{cur.project_name}]")
        estimated_hours = self.get_decimal_input(f"Enter the estimated hours [{cur.estimated_hours}]")
        actual_hours = self.get_decimal_input(f"Enter the actual hours [{cur.actual_hours}]")
        difficulty = self.get_int_input(f"Enter the project difficulty (1-5) [{cur.difficulty}]")
        notes = self.get_string_input(f"Enter the project notes [{cur.notes}]")

        project = Project(
            project_id=cur.project_id,
            project_name=cur.project_name if project_name is None else project_name,
            estimated_hours=cur.estimated_hours if estimated_hours is None else estimated_hours,
            actual_hours=cur.actual_hours if actual_hours is None else actual_hours,
            difficulty=cur.difficulty if difficulty is None else difficulty,
            notes=cur.notes if notes is None else notes,
        )
        self.service.modify_project_details(project)
        self.cur_project = self.service.fetch_project_by_id(cur.project_id)

    def delete_project(self) -> None:
        self.list_projects()
        project_id = self.get_project_id_input("Enter the ID of the project to delete")

        self.service.delete_project(project_id)
        print(f"Project {project_id} was deleted successfully.")

        if self.cur_project is not None and self.cur_project.project_id == project_id:
            self.cur_project = None

    def exit_menu(self) -> bool:
        print("Exiting the menu.")
        return True

    # ── Input helpers ─────────────────────────────────────

    def get_user_selection(self) -> int:
        self.print_operations()
        selection = self.get_int_input("Enter a menu selection")
        return -1 if selection is None else selection

    def print_operations(self) -> None:
        print("\nThese are the available selections. Press the Enter key to quit:")
        for line in OPERATIONS:
            print(f"   {line}")
        if self.cur_project is None:
            print("\nYou are not working with a project.")
        else:
            print(f"\nYou are working with project: \n{self.cur_project}")

    @staticmethod
    def get_string_input(prompt: str) -> Optional[str]:
        """Read a line; blank input is None."""
        value = input(f"{prompt}: ").strip()
        return value or None

    @classmethod
    def get_int_input(cls, prompt: str) -> Optional[int]:
        value = cls.get_string_input(prompt)
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"{value} is not a valid number.")

    @classmethod
    def get_project_id_input(cls, prompt: str) -> int:
        """Like get_int_input, but a blank answer is an error."""
        project_id = cls.get_int_input(prompt)
        if project_id is None:
            raise ValueError("A project ID is required.")
        return project_id

    @classmethod
    def get_decimal_input(cls, prompt: str) -> Optional[Decimal]:
        """Read a decimal rounded to two places."""
        value = cls.get_string_input(prompt)
        if value is None:
            return None
        try:
            return Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        except InvalidOperation:
            raise ValueError(f"{value} is not a valid decimal number.")


def main() -> None:
    """Initialize the database and run the menu."""

    # ── 1. Database setup ─────────────────────────────────
    logger.info("Initializing database...")
    init_pool()
    create_tables()
    seed_categories()

    # ── 2. Menu loop ──────────────────────────────────────
    try:
        ProjectsApp().process_user_selections()
    finally:
        # ── 3. Cleanup on shutdown ────────────────────────
        close_pool()
        logger.info("Projects app stopped.")


if __name__ == "__main__":
    main()
