"""
Reference data entity models.

Roles, sections and genders are read-only for the data-access layer; they are
provisioned together with the store.
"""

from __future__ import annotations

from sqlmodel import Field

from ..base import Base


class RoleRow(Base, table=True):
    """Row model for ``role``."""

    __tablename__ = "role"

    name: str = Field(primary_key=True, max_length=128)


class SektionRow(Base, table=True):
    """Row model for ``sektion``."""

    __tablename__ = "sektion"

    num: int = Field(primary_key=True)


class GenderRow(Base, table=True):
    """Row model for ``gender``."""

    __tablename__ = "gender"

    name: str = Field(primary_key=True, max_length=32)
