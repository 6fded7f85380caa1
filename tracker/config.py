"""
Configuration helpers: environment loading and database URL resolution.
"""
import os

from dotenv import load_dotenv

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
DOTENV_PATH = os.path.join(PROJECT_ROOT, "database", ".env")

POSTGRES_VARIABLES = [
    "POSTGRES_USER",
    "POSTGRES_PASSWORD",
    "POSTGRES_DB",
    "POSTGRES_ADDRESS",
]
DEFAULT_POSTGRES_PORT = "5432"


def load_environment(dotenv_path: str = DOTENV_PATH) -> bool:
    """Loads the .env file from the 'database' folder. Returns False if it was not found."""
    return load_dotenv(dotenv_path)


def get_database_url() -> str:
    """
    Returns the SQLAlchemy database URL.

    DATABASE_URL wins when it is set. Otherwise a PostgreSQL URL is built from
    the POSTGRES_* variables (POSTGRES_PORT is optional).
    """
    database_url = os.environ.get("DATABASE_URL")
    if database_url:
        return database_url

    missing = [name for name in POSTGRES_VARIABLES if not os.environ.get(name)]
    if missing:
        raise ValueError(
            "Database environment variables are not set: "
            f"{', '.join(missing)}. "
            "Please check your .env file in the 'database' folder."
        )

    user = os.environ["POSTGRES_USER"]
    password = os.environ["POSTGRES_PASSWORD"]
    address = os.environ["POSTGRES_ADDRESS"]
    database = os.environ["POSTGRES_DB"]
    port = os.environ.get("POSTGRES_PORT", DEFAULT_POSTGRES_PORT)

    return f"postgresql://{user}:{password}@{address}:{port}/{database}"


def get_sentry_dsn() -> str | None:
    return os.environ.get("SENTRY_DSN") or None


def get_sentry_environment() -> str:
    return os.environ.get("SENTRY_ENVIRONMENT", "cli-prod")


def seed_requested() -> bool:
    """True when SEED_SAMPLE_DATA is set to a truthy value (1, true, yes)."""
    return os.environ.get("SEED_SAMPLE_DATA", "").strip().lower() in ("1", "true", "yes")
