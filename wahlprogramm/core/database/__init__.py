"""
Data-access layer for the wahlprogramm store.

This package provides the single component that owns all database access,
together with the table entities and the bundled schema migrations.

Structure:
- entities/: SQLModel table models, one module per table group
- migrations/: Alembic script directory applied by ``DataStore.initialize``
- store.py: ``DataStore``, the data-access service
- migration.py: In-process Alembic runner
- errors.py: ``DataStoreError`` hierarchy
- utils.py: Engine and session factory helpers
"""

from .base import Base
from .errors import ConnectivityError, DataStoreError, MigrationError, WriteError
from .store import DataStore
from .utils import create_engine, create_sessionmaker, normalize_database_url, sqlite_database_path

__all__ = [
    "Base",
    "ConnectivityError",
    "DataStore",
    "DataStoreError",
    "MigrationError",
    "WriteError",
    "create_engine",
    "create_sessionmaker",
    "normalize_database_url",
    "sqlite_database_path",
]
