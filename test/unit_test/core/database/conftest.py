"""Test configuration for database unit tests.

This module provides common fixtures for testing the data-access layer
against a migrated SQLite store in a temporary directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable

import pytest
from sqlmodel import Session

from wahlprogramm.core.database import DataStore
from wahlprogramm.core.database.entities import GenderRow, RoleRow, SektionRow
from wahlprogramm.core.models import Candidate, User


@pytest.fixture(scope="function")
def store_path(tmp_path: Path) -> Path:
    """Location of the store file for one test."""
    return tmp_path / "wahlprogramm.sql"


@pytest.fixture(scope="function")
def store(store_path: Path) -> DataStore:
    """Freshly migrated, empty store."""
    data_store = DataStore(database_path=store_path)
    data_store.initialize()
    return data_store


@pytest.fixture(scope="function")
def unreachable_store(tmp_path: Path) -> DataStore:
    """Store whose file lives in a directory that does not exist."""
    return DataStore(database_path=tmp_path / "missing" / "wahlprogramm.sql")


@pytest.fixture(scope="function")
def seed_reference_data(store: DataStore) -> Callable[..., None]:
    """Insert roles, sections and genders directly, bypassing the read-only API."""

    def _seed(
        roles: Iterable[str] = (),
        sections: Iterable[int] = (),
        genders: Iterable[str] = (),
    ) -> None:
        with Session(store.engine) as session:
            session.add_all([RoleRow(name=name) for name in roles])
            session.add_all([SektionRow(num=num) for num in sections])
            session.add_all([GenderRow(name=name) for name in genders])
            session.commit()

    return _seed


@pytest.fixture(scope="function")
def admin() -> User:
    return User(name="admin", password="s3cret")


@pytest.fixture(scope="function")
def alice() -> Candidate:
    return Candidate(name="Alice", gender="f")


@pytest.fixture(scope="function")
def bob() -> Candidate:
    return Candidate(name="Bob", gender="m")
