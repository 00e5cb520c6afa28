"""Fixtures for end-to-end store tests."""

from pathlib import Path

import pytest

from wahlprogramm.core.config import Settings
from wahlprogramm.core.database import DataStore
from wahlprogramm.core.models import User

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent.parent


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def administrator() -> User:
    return User(name="admin", password="admin")


@pytest.fixture
def data_store(tmp_path: Path, monkeypatch, administrator: User) -> DataStore:
    """Store built from environment settings and initialized like on first start."""
    monkeypatch.setenv("WAHLPROGRAMM_DATABASE_PATH", str(tmp_path / "wahlprogramm.sql"))
    store = DataStore.from_settings(Settings(_env_file=None))
    store.initialize(administrator)
    return store
