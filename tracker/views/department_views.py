"""
Department Views: CLI interactions for listing and adding departments.
"""
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from sqlalchemy.orm import Session

import tracker.controllers.department_controller as dc
from tracker.views.prompts import ask_text

console = Console()


def display_department_table(departments: list, title: str):
    """Utility function to display departments in a Rich Table."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("ID", style="dim", width=5)
    table.add_column("Name", style="yellow", min_width=20)

    for dept in departments:
        table.add_row(str(dept.id), escape(dept.name))

    console.print(table)


def list_departments_cli(session: Session) -> None:
    """CLI interface to display every department."""
    console.print("\n[bold blue]----- DEPARTMENT LIST ----- [/bold blue]")

    departments = dc.list_departments(session)
    if departments is None:
        return

    if departments:
        display_department_table(departments, "Departments")
    else:
        console.print("[yellow]No departments found in the database.[/yellow]")


def create_department_cli(session: Session) -> None:
    """CLI interface to add a department."""
    console.print("\n[bold green]----- ADD DEPARTMENT ----- [/bold green]")

    name = ask_text("What is the name of the new department?")

    new_department = dc.create_department(session, name)

    if new_department:
        console.print(
            f"\n[bold green]SUCCESS:[/bold green] Department '{escape(new_department.name)}' added."
        )
