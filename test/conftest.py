from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _isolated_store_environment(monkeypatch: pytest.MonkeyPatch):
    """Keep a developer's WAHLPROGRAMM_* variables out of the tests."""
    for key in list(os.environ):
        if key.startswith("WAHLPROGRAMM_"):
            monkeypatch.delenv(key, raising=False)
    yield
