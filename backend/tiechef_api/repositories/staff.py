"""
Staff Repository - Data access for employees.
"""

from typing import Sequence

from sqlalchemy.orm import Session

from shared.config.constants import StaffRole, StaffType
from tiechef_api.models import Staff
from .base import Repository


class StaffRepository(Repository[Staff]):
    """Repository for Staff entities with type/role filters and email lookup."""

    def __init__(self, session: Session):
        super().__init__(Staff, session)

    def find_by_type(self, staff_type: StaffType) -> Sequence[Staff]:
        return self.find(Staff.type == staff_type)

    def find_by_role(self, role: StaffRole) -> Sequence[Staff]:
        return self.find(Staff.role == role)

    def email_taken(self, email: str, *, exclude_id: int | None = None) -> bool:
        """
        True when another staff member already uses this email.
        exclude_id skips the record being updated.
        """
        criteria = [Staff.email == email]
        if exclude_id is not None:
            criteria.append(Staff.staff_id != exclude_id)
        return self.exists(*criteria)


def get_staff_repository(db: Session) -> StaffRepository:
    return StaffRepository(db)
