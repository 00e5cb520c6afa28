"""Initial schema for the wahlprogramm store

Revision ID: 20191101_000000
Revises: None
Create Date: 2019-11-01 00:00:00.000000

This is the initial migration that creates every table of the store:
- Login accounts (user)
- Candidates and the reference data they are nominated against (candidate, role, sektion, gender)
- Nominations of candidates for a role in a section (role_sektion_candidate)

Reference data is provisioned separately; the migration creates empty tables.

Revision format: YYYYMMDD_HHMMSS_description

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20191101_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all tables."""

    op.create_table(
        "user",
        sa.Column("username", sa.String(128), nullable=False),
        sa.Column("password", sa.String(256), nullable=False),
        sa.PrimaryKeyConstraint("username"),
    )

    op.create_table(
        "candidate",
        sa.Column("name", sa.String(128), nullable=False),
        sa.Column("gender", sa.String(32), nullable=False),
        sa.PrimaryKeyConstraint("name"),
    )

    op.create_table(
        "role",
        sa.Column("name", sa.String(128), nullable=False),
        sa.PrimaryKeyConstraint("name"),
    )

    op.create_table(
        "sektion",
        sa.Column("num", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("num"),
    )

    op.create_table(
        "gender",
        sa.Column("name", sa.String(32), nullable=False),
        sa.PrimaryKeyConstraint("name"),
    )

    op.create_table(
        "role_sektion_candidate",
        sa.Column("sektion_num", sa.Integer(), nullable=False),
        sa.Column("role_name", sa.String(128), nullable=False),
        sa.Column("candidate_name", sa.String(128), nullable=False),
        sa.PrimaryKeyConstraint("sektion_num", "role_name", "candidate_name"),
        sa.ForeignKeyConstraint(["sektion_num"], ["sektion.num"]),
        sa.ForeignKeyConstraint(["role_name"], ["role.name"]),
        sa.ForeignKeyConstraint(["candidate_name"], ["candidate.name"]),
    )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table("role_sektion_candidate")
    op.drop_table("gender")
    op.drop_table("sektion")
    op.drop_table("role")
    op.drop_table("candidate")
    op.drop_table("user")
