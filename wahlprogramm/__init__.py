"""wahlprogramm.

Persistence layer of the Wahlprogramm election-management tool.

The package exposes one service, ``DataStore``, which stores login accounts,
candidates and their nominations for a role in a section in an embedded
SQLite file. The GUI of the tool is not part of this package; it constructs a
``DataStore`` from ``Settings`` and calls it for every screen.

Core subpackages
----------------

- ``wahlprogramm.core.database``: the ``DataStore`` service, SQLModel table
  entities, and the Alembic migrations that create the schema.
- ``wahlprogramm.core.models``: pydantic records handed across the
  data-access boundary.
- ``wahlprogramm.core.config`` / ``wahlprogramm.core.logging_config``:
  settings and logging.

Typical use::

    from wahlprogramm import DataStore, User
    from wahlprogramm.core.config import settings

    store = DataStore.from_settings(settings)
    if not store.store_exists():
        store.initialize(User(name="admin", password="..."))
"""

from wahlprogramm.core.database import (
    ConnectivityError,
    DataStore,
    DataStoreError,
    MigrationError,
    WriteError,
)
from wahlprogramm.core.models import Assignment, Candidate, User

__all__ = [
    "Assignment",
    "Candidate",
    "ConnectivityError",
    "DataStore",
    "DataStoreError",
    "MigrationError",
    "User",
    "WriteError",
]
