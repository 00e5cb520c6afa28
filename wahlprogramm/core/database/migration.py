"""
Schema migration runner.

Runs the Alembic revisions bundled in ``migrations/`` in-process. The caller's
engine is shared with Alembic through ``config.attributes["connection"]`` so
that migrating and seeding see the same store. Every failure is reported as
``MigrationError``.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from alembic.script.revision import RevisionError
from alembic.util.exc import CommandError
from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError

from wahlprogramm.core.logging_config import get_logger

from .errors import MigrationError

logger = get_logger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parent / "migrations"


def build_alembic_config(database_url: str, script_location: Path = MIGRATIONS_DIR) -> Config:
    """Build an Alembic ``Config`` without an ini file.

    Args:
        database_url: SQLAlchemy URL of the store
        script_location: Directory holding ``env.py`` and ``versions/``

    Returns:
        Alembic configuration for in-process commands
    """
    cfg = Config()
    cfg.set_main_option("script_location", str(script_location))
    # ConfigParser interpolation treats '%' as special
    cfg.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    return cfg


def head_revisions(script_location: Path = MIGRATIONS_DIR) -> List[str]:
    """Return the head revision ids of the bundled scripts.

    Raises:
        MigrationError: If the script directory is missing or holds no revisions
    """
    if not (Path(script_location) / "env.py").is_file():
        raise MigrationError(f"migration scripts not found at {script_location}")
    try:
        heads = list(ScriptDirectory.from_config(build_alembic_config("", script_location)).get_heads())
    except (CommandError, RevisionError) as exc:
        raise MigrationError(str(exc)) from exc
    if not heads:
        raise MigrationError(f"no revisions found in {script_location}")
    return heads


def current_revision(engine: Engine) -> str | None:
    """Return the revision recorded in the store, or None for an unversioned store."""
    with engine.connect() as connection:
        return MigrationContext.configure(connection).get_current_revision()


def upgrade_to_head(engine: Engine, script_location: Path = MIGRATIONS_DIR) -> None:
    """Bring the store to the latest revision.

    Safe to call on a store that is already current; Alembic then applies
    nothing.

    Args:
        engine: Engine bound to the store
        script_location: Directory holding ``env.py`` and ``versions/``

    Raises:
        MigrationError: If the scripts are missing, the recorded revision is
            unknown to them, or a revision fails to apply
    """
    heads = head_revisions(script_location)
    cfg = build_alembic_config(engine.url.render_as_string(hide_password=False), script_location)
    try:
        with engine.begin() as connection:
            cfg.attributes["connection"] = connection
            command.upgrade(cfg, "head")
    except (CommandError, RevisionError, SQLAlchemyError) as exc:
        logger.error("Migration of %s failed", engine.url, exc_info=True)
        raise MigrationError(str(exc)) from exc
    logger.info("Store %s migrated to %s", engine.url, ", ".join(heads))
