"""
Main menu interface (View layer).
Displays the eight actions and routes the operator's choice to its handler,
until the operator picks Exit.
"""
import sys

import sentry_sdk
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from sqlalchemy.orm import sessionmaker

from .department_views import create_department_cli, list_departments_cli
from .employee_views import (
    create_employee_cli,
    list_employees_cli,
    update_employee_role_cli,
)
from .role_views import create_role_cli, list_roles_cli

console = Console()

EXIT_LABEL = "Exit"

# Order is the order shown on screen; option N is MENU_ACTIONS[N - 1].
MENU_ACTIONS = [
    ("View All Employees", list_employees_cli),
    ("Add Employee", create_employee_cli),
    ("Update Employee Role", update_employee_role_cli),
    ("View All Roles", list_roles_cli),
    ("Add Role", create_role_cli),
    ("View All Departments", list_departments_cli),
    ("Add Department", create_department_cli),
    (EXIT_LABEL, None),
]


def display_main_menu():
    """Displays the menu options."""
    console.print("\n" + "=" * 50, style="bold magenta")
    console.print("[bold magenta]EMPLOYEE TRACKER[/bold magenta] | What would you like to do?")
    console.print("=" * 50, style="bold magenta")

    for number, (label, handler) in enumerate(MENU_ACTIONS, start=1):
        if handler is None:
            console.print("--------------------------------------")
            console.print(f"{number}. [bold red]{label}[/bold red]")
        else:
            console.print(f"{number}. {label}")

    console.print("=" * 50, style="bold magenta")


def run_action(session_factory: sessionmaker, label: str, handler) -> None:
    """
    Runs one handler in its own session. Whatever the handler does, control
    comes back to the menu, except end of input which ends the application.
    """
    session = session_factory()
    try:
        handler(session)
    except EOFError:
        raise
    except Exception as e:
        sentry_sdk.capture_exception(e)
        console.print(
            f"[bold red]An unexpected error occurred during '{label}':[/bold red] "
            f"{escape(str(e))}. Error logged to Sentry."
        )
    finally:
        session.close()


def exit_application():
    """Says goodbye and ends the process with status 0."""
    console.print("[bold yellow]Goodbye![/bold yellow]")
    sentry_sdk.flush(timeout=1.0)
    sys.exit(0)


def main_menu(session_factory: sessionmaker) -> None:
    """
    Main loop: show the menu, run the chosen action, repeat.
    The way out is the Exit option, or Ctrl-C / Ctrl-D at any prompt.
    """
    choices = [str(i) for i in range(1, len(MENU_ACTIONS) + 1)]

    while True:
        display_main_menu()

        try:
            choice = Prompt.ask(
                f"Select an option [1-{len(MENU_ACTIONS)}]", choices=choices, show_choices=False
            ).strip()

            label, handler = MENU_ACTIONS[int(choice) - 1]

            if handler is None:
                exit_application()

            run_action(session_factory, label, handler)
        except (EOFError, KeyboardInterrupt):
            console.print()
            exit_application()
