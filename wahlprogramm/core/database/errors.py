"""Error types for the data-access layer.

Defines a small hierarchy of exceptions raised by ``DataStore`` to signal an
unreachable store, failed writes, and schema bring-up failures.
"""

from __future__ import annotations


class DataStoreError(Exception):
    """Base error for all data-access exceptions."""


class ConnectivityError(DataStoreError):
    """Raised when the store cannot be opened or used."""

    def __init__(self, database_url: str, message: str) -> None:
        super().__init__(f"Cannot reach store '{database_url}': {message}")
        self.database_url = database_url


class WriteError(DataStoreError):
    """Raised when an insert or delete fails; nothing from the call was committed."""

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"Write failed during '{operation}': {message}")
        self.operation = operation


class MigrationError(DataStoreError):
    """Raised when the schema cannot be brought to the latest revision."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Schema migration failed: {message}")
