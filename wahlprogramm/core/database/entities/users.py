"""
User entity model.

Login accounts are inserted once and never updated or deleted by the
data-access layer. The password column holds the comparable form handed in
by the caller.
"""

from __future__ import annotations

from sqlmodel import Field

from ..base import Base


class UserRow(Base, table=True):
    """Row model for ``user``.

    Table: user
    """

    __tablename__ = "user"

    username: str = Field(primary_key=True, max_length=128)
    password: str = Field(max_length=256)

    def __repr__(self) -> str:
        return f"UserRow(username={self.username})"
