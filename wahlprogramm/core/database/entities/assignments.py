"""
Assignment entity model.

An assignment nominates a candidate for a role in a section. Every column is
part of the primary key and references its parent table, so an assignment can
only point at an existing candidate, role and section.

Table: role_sektion_candidate
"""

from __future__ import annotations

from sqlmodel import Field

from ..base import Base


class AssignmentRow(Base, table=True):
    """Row model for ``role_sektion_candidate``."""

    __tablename__ = "role_sektion_candidate"

    sektion_num: int = Field(primary_key=True, foreign_key="sektion.num")
    role_name: str = Field(primary_key=True, foreign_key="role.name", max_length=128)
    candidate_name: str = Field(primary_key=True, foreign_key="candidate.name", max_length=128)

    def __repr__(self) -> str:
        return (
            f"AssignmentRow(sektion_num={self.sektion_num}, role_name={self.role_name}, "
            f"candidate_name={self.candidate_name})"
        )
