"""SQLModel data-access service for the election store.

``DataStore`` is the only component that talks to the database. It is built
once from its configuration and injected into callers.

Transaction model
-----------------

Each public method opens a ``Session``, performs its work, and closes it. The
engine uses ``NullPool``, so the DBAPI connection is closed as well and nothing
is shared between calls. Writes commit once at the end of the method and roll
back on any failure, so multi-row writes are all-or-nothing.

Failure model
-------------

- Only ``initialize`` creates the store file. Any other call on a missing
  file is treated as an unreachable store.
- Reads that cannot reach or use the store log the failure and return an
  empty result (``[]`` or ``False``).
- Writes raise ``ConnectivityError`` when the store cannot be reached and
  ``WriteError`` when a statement fails.
- ``initialize`` raises ``MigrationError``.
"""

from __future__ import annotations

import functools
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional, TypeVar

from sqlalchemy import delete, func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, col, select

from wahlprogramm.core.config import DEFAULT_DATABASE_PATH, Settings, sqlite_url_for
from wahlprogramm.core.logging_config import get_logger
from wahlprogramm.core.models import Assignment, Candidate, User

from .entities import AssignmentRow, CandidateRow, GenderRow, RoleRow, SektionRow, UserRow
from .errors import ConnectivityError, WriteError
from .migration import MIGRATIONS_DIR, upgrade_to_head
from .utils import create_engine, create_sessionmaker, normalize_database_url, sqlite_database_path

logger = get_logger(__name__)

T = TypeVar("T")


def _degrades_to(default_factory: Callable[[], T]):
    """Turn a ``ConnectivityError`` raised by a read into an empty result."""

    def decorator(method: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(method)
        def wrapper(self: "DataStore", *args, **kwargs) -> T:
            try:
                return method(self, *args, **kwargs)
            except ConnectivityError:
                logger.error("%s could not read from the store", method.__name__, exc_info=True)
                return default_factory()

        return wrapper

    return decorator


class DataStore:
    """Data-access API over users, candidates, reference data and assignments."""

    def __init__(
        self,
        database_url: Optional[str] = None,
        database_path: str | Path = DEFAULT_DATABASE_PATH,
        migrations_dir: Path = MIGRATIONS_DIR,
    ) -> None:
        """
        Args:
            database_url: Connection string; defaults to a SQLite URL for ``database_path``
            database_path: Location of the store file; a SQLite ``database_url``
                takes precedence
            migrations_dir: Alembic script directory used by ``initialize``
        """
        self.database_url = normalize_database_url(database_url or sqlite_url_for(database_path))
        self.database_path = sqlite_database_path(self.database_url) or Path(database_path)
        self.migrations_dir = migrations_dir
        self.engine = create_engine(self.database_url)
        self.session_factory = create_sessionmaker(self.engine)

    @classmethod
    def from_settings(cls, settings: Settings) -> "DataStore":
        """Build a store from resolved application settings."""
        database = settings.database
        return cls(database_url=database.resolved_url, database_path=database.path)

    def __repr__(self) -> str:
        return f"DataStore(url={self.engine.url})"

    # ------------------------------------------------------------------
    # Session handling
    # ------------------------------------------------------------------

    @contextmanager
    def _session(self, operation: str) -> Iterator[Session]:
        if not self.store_exists():
            raise ConnectivityError(str(self.engine.url), f"store file not found at {self.database_path}")
        session = self.session_factory()
        try:
            # Connect eagerly so an unreachable store is reported as such
            session.connection()
        except SQLAlchemyError as exc:
            session.close()
            raise ConnectivityError(str(self.engine.url), str(exc)) from exc
        logger.debug("%s: connection opened", operation)
        try:
            yield session
        finally:
            session.close()

    @contextmanager
    def _read(self, operation: str) -> Iterator[Session]:
        with self._session(operation) as session:
            try:
                yield session
            except SQLAlchemyError as exc:
                raise ConnectivityError(str(self.engine.url), str(exc)) from exc

    @contextmanager
    def _write(self, operation: str) -> Iterator[Session]:
        try:
            with self._session(operation) as session:
                try:
                    yield session
                    session.commit()
                except SQLAlchemyError as exc:
                    session.rollback()
                    raise WriteError(operation, str(exc)) from exc
        except (ConnectivityError, WriteError):
            logger.error("%s failed", operation, exc_info=True)
            raise

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def store_exists(self) -> bool:
        """Return whether the backing file is present at the configured location."""
        return self.database_path.is_file()

    def initialize(self, admin_user: Optional[User] = None) -> None:
        """Migrate the store to the latest schema and seed the administrator.

        Idempotent: an already-current store is left as is, and the
        administrator is only inserted when no user of that name exists.

        Args:
            admin_user: Account to provision on first start

        Raises:
            MigrationError: If the schema cannot be brought up
            WriteError: If the administrator cannot be stored
        """
        logger.info("Initializing store at %s", self.engine.url)
        upgrade_to_head(self.engine, self.migrations_dir)
        if admin_user is None:
            return
        with self._write("initialize") as session:
            if session.get(UserRow, admin_user.name) is None:
                session.add(_user_row(admin_user))
                logger.info("Seeded administrator account '%s'", admin_user.name)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def insert_user(self, user: User) -> None:
        """Insert one login account.

        Raises:
            WriteError: On a duplicate username or any statement failure
            ConnectivityError: If the store cannot be reached
        """
        with self._write("insert_user") as session:
            session.add(_user_row(user))

    @_degrades_to(bool)
    def confirm_user(self, user: User) -> bool:
        """Return True iff exactly one stored account matches name and password."""
        stmt = (
            select(func.count())
            .select_from(UserRow)
            .where(
                UserRow.username == user.name,
                UserRow.password == user.password.get_secret_value(),
            )
        )
        with self._read("confirm_user") as session:
            matches = session.exec(stmt).one()
        return matches == 1

    # ------------------------------------------------------------------
    # Candidates
    # ------------------------------------------------------------------

    def insert_candidate(self, candidate: Candidate) -> None:
        """Insert one candidate in its own commit boundary.

        Raises:
            WriteError: If a candidate of that name already exists
            ConnectivityError: If the store cannot be reached
        """
        with self._write("insert_candidate") as session:
            session.add(CandidateRow(name=candidate.name, gender=candidate.gender))

    @_degrades_to(bool)
    def candidate_exists(self, candidate: Candidate) -> bool:
        """Return whether a candidate with the same name and gender is stored.

        The check and a following ``insert_candidate`` are not atomic; the
        primary key on ``candidate.name`` turns a racing duplicate into a
        ``WriteError``.
        """
        stmt = (
            select(func.count())
            .select_from(CandidateRow)
            .where(CandidateRow.name == candidate.name, CandidateRow.gender == candidate.gender)
        )
        with self._read("candidate_exists") as session:
            return session.exec(stmt).one() > 0

    @_degrades_to(list)
    def list_candidates_for(self, section: int, role: str) -> List[Candidate]:
        """List the candidates nominated for ``role`` in ``section``."""
        stmt = (
            select(CandidateRow)
            .join(AssignmentRow, col(AssignmentRow.candidate_name) == col(CandidateRow.name))
            .where(AssignmentRow.sektion_num == section, AssignmentRow.role_name == role)
        )
        with self._read("list_candidates_for") as session:
            rows = session.exec(stmt).all()
        return [Candidate(name=row.name, gender=row.gender) for row in rows]

    def sweep_orphan_candidates(self) -> int:
        """Delete every candidate no assignment refers to.

        Returns:
            Number of candidates deleted
        """
        referenced = select(AssignmentRow.candidate_name)
        stmt = delete(CandidateRow).where(col(CandidateRow.name).not_in(referenced))
        with self._write("sweep_orphan_candidates") as session:
            swept = session.exec(stmt.execution_options(synchronize_session=False)).rowcount
        logger.info("Swept %d orphan candidate(s)", swept)
        return swept

    # ------------------------------------------------------------------
    # Assignments
    # ------------------------------------------------------------------

    def insert_assignments(self, candidates: Iterable[Candidate], role: str, section: int) -> List[Assignment]:
        """Nominate each candidate for ``role`` in ``section``.

        All rows are committed together; if one fails, none are stored.

        Returns:
            The stored assignments, in input order

        Raises:
            WriteError: If any row violates the schema (unknown candidate,
                role or section, or a duplicate nomination)
            ConnectivityError: If the store cannot be reached
        """
        rows = [AssignmentRow(sektion_num=section, role_name=role, candidate_name=c.name) for c in candidates]
        with self._write("insert_assignments") as session:
            session.add_all(rows)
        logger.debug("Stored %d assignment(s) for %s in section %d", len(rows), role, section)
        return [
            Assignment(section=row.sektion_num, role=row.role_name, candidate_name=row.candidate_name) for row in rows
        ]

    def clear_assignments(self, section: int, role: str) -> int:
        """Delete every assignment for ``role`` in ``section``.

        Returns:
            Number of assignments deleted
        """
        stmt = delete(AssignmentRow).where(AssignmentRow.sektion_num == section, AssignmentRow.role_name == role)
        with self._write("clear_assignments") as session:
            deleted = session.exec(stmt.execution_options(synchronize_session=False)).rowcount
        logger.debug("Cleared %d assignment(s) for %s in section %d", deleted, role, section)
        return deleted

    # ------------------------------------------------------------------
    # Reference data
    # ------------------------------------------------------------------

    @_degrades_to(list)
    def list_roles(self) -> List[str]:
        with self._read("list_roles") as session:
            return list(session.exec(select(RoleRow.name)).all())

    @_degrades_to(list)
    def list_sections(self) -> List[int]:
        with self._read("list_sections") as session:
            return list(session.exec(select(SektionRow.num)).all())

    @_degrades_to(list)
    def list_genders(self) -> List[str]:
        with self._read("list_genders") as session:
            return list(session.exec(select(GenderRow.name)).all())


def _user_row(user: User) -> UserRow:
    return UserRow(username=user.name, password=user.password.get_secret_value())
