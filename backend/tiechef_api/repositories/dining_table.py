"""
DiningTable Repository - Data access for the floor plan.
"""

from typing import Sequence

from sqlalchemy.orm import Session

from tiechef_api.models import DiningTable
from .base import Repository


class DiningTableRepository(Repository[DiningTable]):
    """Repository for DiningTable entities."""

    def __init__(self, session: Session):
        super().__init__(DiningTable, session)

    def find_by_staff(self, staff_id: int) -> Sequence[DiningTable]:
        return self.find(DiningTable.staff_id == staff_id)

    def find_placed(self) -> Sequence[DiningTable]:
        """Tables that have a position on the layout."""
        return self.find(DiningTable.x.is_not(None) | DiningTable.y.is_not(None))


def get_dining_table_repository(db: Session) -> DiningTableRepository:
    return DiningTableRepository(db)
