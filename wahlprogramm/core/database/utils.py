"""
Database utility functions for engine and session management.

This module provides the core utility functions for creating the database
engine and session factory used by ``DataStore``.

Functions:
- normalize_database_url: Rewrites legacy connection strings to SQLAlchemy URLs
- sqlite_database_path: Extracts the store file a SQLite URL points at
- create_engine: Creates a SQLAlchemy engine that never holds connections between calls
- create_sessionmaker: Creates a session factory with safe defaults
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from sqlalchemy import Engine, event
from sqlalchemy import create_engine as sa_create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool
from sqlmodel import Session


def normalize_database_url(db_url: str) -> str:
    """Rewrite JDBC-style SQLite connection strings to SQLAlchemy URLs.

    Older property files store the connection as ``jdbc:sqlite:<path>``; the
    helper rewrites it to ``sqlite:///<path>``. Any other URL is returned
    unchanged.

    Args:
        db_url: Database connection string

    Returns:
        SQLAlchemy database URL
    """
    return re.sub(r"^jdbc:sqlite:", "sqlite:///", db_url.strip(), count=1)


def sqlite_database_path(db_url: str) -> Optional[Path]:
    """Return the file a SQLite URL points at.

    Returns None for other backends and for in-memory databases.
    """
    url = make_url(normalize_database_url(db_url))
    if url.get_backend_name() != "sqlite" or url.database in (None, "", ":memory:"):
        return None
    return Path(url.database)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA foreign_keys=ON")
    finally:
        cursor.close()


def create_engine(db_url: str) -> Engine:
    """Create a SQLAlchemy engine for the store.

    ``NullPool`` closes the DBAPI connection as soon as a session releases it,
    so no connection is held across calls. SQLite connections get
    ``PRAGMA foreign_keys=ON`` so the schema enforces assignment references.

    Args:
        db_url: Database connection URL

    Returns:
        Configured Engine instance
    """
    engine = sa_create_engine(normalize_database_url(db_url), poolclass=NullPool)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def create_sessionmaker(engine: Engine) -> sessionmaker[Session]:
    """Create a ``sessionmaker`` with safe defaults for this project.

    Args:
        engine: SQLAlchemy engine

    Returns:
        Configured session factory
    """
    return sessionmaker(bind=engine, class_=Session, expire_on_commit=False)

