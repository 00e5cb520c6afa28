"""Unit tests for the table entity models.

Tests verify table names, keys and references of the SQLModel entities.
"""

from __future__ import annotations

from wahlprogramm.core.database.base import Base
from wahlprogramm.core.database.entities import (
    AssignmentRow,
    CandidateRow,
    GenderRow,
    RoleRow,
    SektionRow,
    UserRow,
)


def _primary_key(entity) -> list[str]:
    return [column.name for column in entity.__table__.primary_key.columns]


class TestTableNames:
    def test_all_tables_registered(self):
        assert {
            "user",
            "candidate",
            "role",
            "sektion",
            "gender",
            "role_sektion_candidate",
        } <= set(Base.metadata.tables)

    def test_entity_table_names(self):
        assert UserRow.__tablename__ == "user"
        assert CandidateRow.__tablename__ == "candidate"
        assert RoleRow.__tablename__ == "role"
        assert SektionRow.__tablename__ == "sektion"
        assert GenderRow.__tablename__ == "gender"
        assert AssignmentRow.__tablename__ == "role_sektion_candidate"


class TestKeys:
    def test_user_keyed_by_username(self):
        assert _primary_key(UserRow) == ["username"]

    def test_candidate_keyed_by_name(self):
        assert _primary_key(CandidateRow) == ["name"]

    def test_assignment_composite_key(self):
        assert _primary_key(AssignmentRow) == ["sektion_num", "role_name", "candidate_name"]

    def test_assignment_references(self):
        targets = {fk.parent.name: fk.target_fullname for fk in AssignmentRow.__table__.foreign_keys}

        assert targets == {
            "sektion_num": "sektion.num",
            "role_name": "role.name",
            "candidate_name": "candidate.name",
        }


class TestRepr:
    def test_user_repr_hides_password(self):
        row = UserRow(username="admin", password="s3cret")

        assert repr(row) == "UserRow(username=admin)"
        assert "s3cret" not in repr(row)

    def test_assignment_repr(self):
        row = AssignmentRow(sektion_num=3, role_name="Chair", candidate_name="Alice")

        assert repr(row) == "AssignmentRow(sektion_num=3, role_name=Chair, candidate_name=Alice)"
