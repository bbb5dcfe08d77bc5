"""
DiningTable Service - floor plan tables.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from shared.config.logging import get_logger
from tiechef_api.models import DiningTable
from tiechef_api.repositories import DiningTableRepository
from tiechef_api.schemas import DiningTableDTO
from tiechef_api.seed import dining_table_records
from tiechef_api.services.base_service import BaseCRUDService
from tiechef_api.validators import DINING_TABLE_RULES

logger = get_logger(__name__)


class DiningTableService(BaseCRUDService[DiningTable, DiningTableDTO]):
    """Service for dining tables and their layout."""

    def __init__(self, db: Session):
        super().__init__(
            repo=DiningTableRepository(db),
            model=DiningTable,
            dto_schema=DiningTableDTO,
            entity_name="DiningTable",
            id_field="dining_table_id",
            rules=DINING_TABLE_RULES,
        )

    def list_by_staff(self, staff_id: int) -> list[DiningTableDTO]:
        return self._to_outputs(self._repo.find_by_staff(staff_id))

    def reset_layout(self) -> int:
        """
        Clear x/y on every placed table in a single commit.

        Returns:
            Number of tables that were moved off the layout.
        """
        placed = self._repo.find_placed()
        for table in placed:
            table.x = None
            table.y = None
        if placed:
            self._commit("layout reset")

        logger.info("Dining table layout reset", tables=len(placed))
        return len(placed)

    def _seed_records(self) -> list[DiningTable]:
        return dining_table_records()
