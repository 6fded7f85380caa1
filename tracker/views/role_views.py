"""
Role Views: CLI interactions for listing and adding roles.
"""
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from sqlalchemy.orm import Session

import tracker.controllers.department_controller as dc
import tracker.controllers.role_controller as rc
from tracker.controllers.utils import is_valid_salary, parse_salary
from tracker.views.prompts import ask_choice, ask_text

console = Console()


def display_role_table(roles: list, title: str):
    """Utility function to display roles in a Rich Table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("ID", style="dim", width=5)
    table.add_column("Title", style="bold green", min_width=20)
    table.add_column("Salary", justify="right", style="magenta", min_width=12)
    table.add_column("Department", style="yellow", min_width=15)

    for role in roles:
        table.add_row(
            str(role.id),
            escape(role.title),
            f"{role.salary:.2f}",
            escape(role.department),
        )

    console.print(table)


def list_roles_cli(session: Session) -> None:
    """CLI interface to display every role with its department."""
    console.print("\n[bold blue]----- ROLE LIST ----- [/bold blue]")

    roles = rc.list_roles(session)
    if roles is None:
        return

    if roles:
        display_role_table(roles, "Roles")
    else:
        console.print("[yellow]No roles found in the database.[/yellow]")


def create_role_cli(session: Session) -> None:
    """
    CLI interface to add a role: title, salary (re-asked until it is a number)
    and the department that owns it.
    """
    console.print("\n[bold green]----- ADD ROLE ----- [/bold green]")

    departments = dc.department_choices(session)
    if departments is None:
        return
    if not departments:
        console.print(
            "[bold yellow]WARNING:[/bold yellow] No departments found. Add a department first."
        )
        return

    title = ask_text("What is the title of the new role?")
    salary_text = ask_text(
        "What is the salary of this new role?",
        validator=is_valid_salary,
        error_message="Please enter a valid number (at most 2 decimals, below 100000000)",
    )
    department_id = ask_choice("Which department is this role in?", departments)

    new_role = rc.create_role(session, title, parse_salary(salary_text), department_id)

    if new_role:
        console.print(f"\n[bold green]SUCCESS:[/bold green] Role '{escape(new_role.title)}' added.")
