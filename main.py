"""
This is the main script for the Employee Tracker command-line interface.
It loads the configuration, prepares the database and runs the main menu
until the operator chooses Exit.
"""

import sys

import sentry_sdk
from rich.console import Console
from rich.markup import escape
from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration
from sqlalchemy.exc import SQLAlchemyError

from tracker.config import (
    DOTENV_PATH,
    get_database_url,
    get_sentry_dsn,
    get_sentry_environment,
    load_environment,
    seed_requested,
)
from tracker.database import (
    check_connection,
    create_store_engine,
    init_schema,
    make_session_factory,
)
from tracker.seeds import seed_sample_data
from tracker.views.main_menu import main_menu

console = Console()


def init_sentry():
    """Initializes Sentry SDK using DSN from environment variable (SENTRY_DSN)."""
    sentry_dsn = get_sentry_dsn()

    if sentry_dsn:
        sentry_sdk.init(
            dsn=sentry_dsn,
            traces_sample_rate=1.0,
            environment=get_sentry_environment(),
            integrations=[
                SqlalchemyIntegration(),
            ],
            send_default_pii=False,
        )
        console.print("[bold green]Sentry Initialized (DSN found).[/bold green]")
    else:
        console.print(
            "[bold yellow]Sentry DSN not found. Running without error logging. "
            "Check SENTRY_DSN environment variable.[/bold yellow]"
        )


def fatal(message: str, error: Exception):
    """Reports a startup failure and ends the process with status 1."""
    sentry_sdk.capture_exception(error)
    sentry_sdk.flush(timeout=2.0)
    console.print(f"[bold red]FATAL ERROR {message}:[/bold red] {escape(str(error))}")
    sys.exit(1)


def main():
    """Main entry point of the application."""
    if load_environment():
        console.print(
            f"[bold green]INFO:[/bold green] .env loaded successfully from {DOTENV_PATH}."
        )
    else:
        console.print(
            f"[bold yellow]WARNING:[/bold yellow] Failed to load .env file from "
            f"{DOTENV_PATH}. Using the process environment."
        )

    init_sentry()

    try:
        engine = create_store_engine(get_database_url())
    except (ValueError, SQLAlchemyError) as e:
        fatal("in the database configuration", e)

    console.print("[bold cyan]--- Initializing Database Structure ---[/bold cyan]")

    try:
        check_connection(engine)
        init_schema(engine)
    except SQLAlchemyError as e:
        fatal("while connecting to the database", e)

    session_factory = make_session_factory(engine)

    if seed_requested():
        seed_session = session_factory()
        try:
            seed_sample_data(seed_session)
        except SQLAlchemyError as e:
            fatal("while seeding sample data", e)
        finally:
            seed_session.close()

    main_menu(session_factory)


if __name__ == "__main__":
    main()
