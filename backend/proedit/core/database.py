"""
Database configuration for ProEdit.

Provides the SQLAlchemy engine/session factories and the declarative base
used by the SQL entity store.
"""

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create a synchronous engine for the given URL.

    In-memory SQLite gets a StaticPool so every session shares the one
    connection that holds the database.
    """
    kwargs = {"echo": echo, "future": True}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in database_url or database_url.rstrip("/") == "sqlite:":
            kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Session factory bound to ``engine``."""
    return sessionmaker(
        bind=engine,
        class_=Session,
        expire_on_commit=False,
        autoflush=False,
    )


def create_all_tables(engine: Engine) -> None:
    """Create all tables in the database."""
    # Import models so they register on Base.metadata.
    from proedit import models  # noqa: F401

    Base.metadata.create_all(engine)


def drop_all_tables(engine: Engine) -> None:
    """Drop all tables in the database (for development/testing)."""
    from proedit import models  # noqa: F401

    Base.metadata.drop_all(engine)
