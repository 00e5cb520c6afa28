"""
Candidate entity model.

``name`` alone is the primary key, since assignments refer to a candidate by
name. A second candidate with an existing name fails with an integrity error
whatever its gender, including when two callers race past the existence check.
"""

from __future__ import annotations

from sqlmodel import Field

from ..base import Base


class CandidateRow(Base, table=True):
    """Row model for ``candidate``.

    Table: candidate
    """

    __tablename__ = "candidate"

    name: str = Field(primary_key=True, max_length=128)
    gender: str = Field(max_length=32)

    def __repr__(self) -> str:
        return f"CandidateRow(name={self.name}, gender={self.gender})"
