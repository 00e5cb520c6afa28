"""Domain records exchanged with callers of the data-access layer."""

from __future__ import annotations

from pydantic import Field, SecretStr

from .base import BaseSchema


class User(BaseSchema):
    """
    A login account.

    ``password`` is already in its comparable form; encryption, if any, is
    done by the caller before the record reaches the store.
    """

    name: str = Field(min_length=1)
    password: SecretStr


class Candidate(BaseSchema):
    """A person standing for election, identified by (name, gender)."""

    name: str = Field(min_length=1)
    gender: str


class Assignment(BaseSchema):
    """Nomination of a candidate for a role in a section."""

    section: int
    role: str
    candidate_name: str
