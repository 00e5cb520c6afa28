"""Domain models shared between the store and its callers."""

from .base import BaseSchema
from .domain import Assignment, Candidate, User

__all__ = [
    "Assignment",
    "BaseSchema",
    "Candidate",
    "User",
]
