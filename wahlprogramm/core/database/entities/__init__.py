"""
Database entity models.

This package contains the SQLModel table models of the store, one module per
table or closely related group of tables.

Modules:
- users: Login accounts
- candidates: Candidates standing for election
- reference: Read-only reference data (roles, sections, genders)
- assignments: Nomination of a candidate for a role in a section
"""

from .assignments import AssignmentRow
from .candidates import CandidateRow
from .reference import GenderRow, RoleRow, SektionRow
from .users import UserRow

__all__ = [
    "AssignmentRow",
    "CandidateRow",
    "GenderRow",
    "RoleRow",
    "SektionRow",
    "UserRow",
]
