"""
Engine and session lifecycle.

The engine (and the connection pool behind it) is built once by main.py and
handed to the menu loop as a session factory.
"""
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from tracker.models import Base


def create_store_engine(database_url: str, **kwargs) -> Engine:
    """Creates the SQLAlchemy engine for the given URL."""
    kwargs.setdefault("pool_pre_ping", True)
    return create_engine(database_url, **kwargs)


def check_connection(engine: Engine) -> None:
    """Opens one connection so an unreachable database fails at startup, not in the menu."""
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))


def init_schema(engine: Engine) -> None:
    """Creates the department, role and employee tables if they do not exist."""
    Base.metadata.create_all(engine)


def make_session_factory(engine: Engine) -> sessionmaker:
    """
    Returns the session factory used by the menu loop.
    Every menu action opens (and closes) its own session.
    """
    return sessionmaker(bind=engine)
