"""
Employee Views: Handles all user interface (CLI) interactions for employees.
It gathers reference data and answers, then calls the controller layer.
"""
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from sqlalchemy.orm import Session

import tracker.controllers.employee_controller as ec
import tracker.controllers.role_controller as rc
from tracker.views.prompts import NO_MANAGER, ask_choice, ask_text

console = Console()

# --- Utility Functions (Display) ---


def _cell(value) -> str:
    return "" if value is None else escape(str(value))


def display_employee_table(employees: list, title: str):
    """Utility function to display employees in a Rich Table."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("ID", style="dim", width=5)
    table.add_column("First Name", style="cyan")
    table.add_column("Last Name", style="cyan")
    table.add_column("Title")
    table.add_column("Department", style="yellow")
    table.add_column("Salary", justify="right")
    table.add_column("Manager")

    for emp in employees:
        salary = "" if emp.salary is None else f"{emp.salary:.2f}"
        table.add_row(
            str(emp.id),
            _cell(emp.first_name),
            _cell(emp.last_name),
            _cell(emp.title),
            _cell(emp.department),
            salary,
            _cell(emp.manager),
        )

    console.print(table)


# --- CLI Functions (Interface Layer) ---


def list_employees_cli(session: Session) -> None:
    """CLI interface to display the employee report."""
    console.print("\n[bold blue]----- EMPLOYEE LIST ----- [/bold blue]")

    employees = ec.list_employees(session)
    if employees is None:
        return

    if employees:
        display_employee_table(employees, "Employees")
    else:
        console.print("[yellow]No employees found in the database.[/yellow]")


def create_employee_cli(session: Session) -> None:
    """
    CLI interface to add an employee: first and last name, role, and manager
    (any existing employee, or None).
    """
    console.print("\n[bold green]----- ADD EMPLOYEE ----- [/bold green]")

    roles = rc.role_choices(session)
    if roles is None:
        return
    managers = ec.employee_choices(session)
    if managers is None:
        return

    if not roles:
        console.print("[bold yellow]WARNING:[/bold yellow] No roles found. Add a role first.")
        return

    first_name = ask_text("What is the employee's first name?")
    last_name = ask_text("What is the employee's last name?")
    role_id = ask_choice("What is the employee's role?", roles)
    manager_id = ask_choice("Who is the employee's manager?", [NO_MANAGER] + managers)

    new_employee = ec.create_employee(
        session,
        first_name=first_name,
        last_name=last_name,
        role_id=role_id,
        manager_id=manager_id,
    )

    if new_employee:
        console.print(
            f"\n[bold green]SUCCESS:[/bold green] Employee "
            f"{escape(first_name)} {escape(last_name)} added."
        )


def update_employee_role_cli(session: Session) -> None:
    """CLI interface to assign a different role to an existing employee."""
    console.print("\n[bold yellow]----- UPDATE EMPLOYEE ROLE ----- [/bold yellow]")

    employees = ec.employee_choices(session)
    if employees is None:
        return
    roles = rc.role_choices(session)
    if roles is None:
        return

    if not employees:
        console.print("[bold yellow]WARNING:[/bold yellow] No employees found.")
        return
    if not roles:
        console.print("[bold yellow]WARNING:[/bold yellow] No roles found. Add a role first.")
        return

    employee_id = ask_choice("Which employee's role do you want to update?", employees)
    role_id = ask_choice("Which role do you want to assign the selected employee?", roles)

    updated = ec.update_employee_role(session, employee_id, role_id)

    if updated is None:
        return
    if updated:
        console.print("\n[bold green]SUCCESS:[/bold green] Employee's role has been updated.")
    else:
        console.print(
            f"\n[bold red]ERROR:[/bold red] Employee with ID {employee_id} no longer exists."
        )
