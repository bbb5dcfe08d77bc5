"""
TableView Service - the floor dashboard.

Records live in the process-wide in-memory store. The table id is chosen by
the client and must be unique. display_text is derived from the other fields
and rebuilt on every create, update and status change.
"""

from __future__ import annotations

from shared.config.settings import settings
from shared.config.constants import TableViewStatus
from shared.config.logging import get_logger
from shared.utils.exceptions import DuplicateEntityError
from tiechef_api.models import TableViewRecord
from tiechef_api.repositories import InMemoryStore, TableViewRepository
from tiechef_api.schemas import TableViewDTO
from tiechef_api.seed import table_view_records
from tiechef_api.services.base_service import BaseCRUDService
from tiechef_api.validators import TABLE_VIEW_RULES

logger = get_logger(__name__)


def build_display_text(view: TableViewRecord, currency_symbol: str = "$") -> str:
    """
    One-line summary of a table, e.g.
    "Table 2 - Staff: Maria Sidorova, 2 dishes, Paid, Sum: $89.99"
    """
    staff = f"Staff: {view.staff_name}" if view.staff_name else "Free"
    dishes = f"{view.dish_count} dishes" if view.dish_count > 0 else "No orders"
    payment = "Paid" if view.was_paid else "Not paid"
    total = f"Sum: {currency_symbol}{view.sum:,.2f}" if view.sum is not None else "Sum not specified"
    return f"Table {view.table_id} - {staff}, {dishes}, {payment}, {total}"


class TableViewService(BaseCRUDService[TableViewRecord, TableViewDTO]):
    """Service for dashboard table views."""

    def __init__(self, store: InMemoryStore[TableViewRecord], currency_symbol: str | None = None):
        super().__init__(
            repo=TableViewRepository(store),
            model=TableViewRecord,
            dto_schema=TableViewDTO,
            entity_name="TableView",
            id_field="table_id",
            rules=TABLE_VIEW_RULES,
        )
        self._currency_symbol = currency_symbol or settings.currency_symbol

    # =========================================================================
    # Filters
    # =========================================================================

    def list_by_status(self, status: TableViewStatus) -> list[TableViewDTO]:
        return self._to_outputs(self._repo.find_by_status(status))

    def list_by_staff_name(self, staff_name: str) -> list[TableViewDTO]:
        return self._to_outputs(self._repo.find_by_staff_name(staff_name))

    # =========================================================================
    # Narrow mutations
    # =========================================================================

    def set_status(self, table_id: int, status: TableViewStatus) -> TableViewDTO:
        """
        Raises:
            NotFoundError: If the table view does not exist.
        """
        view = self.get_entity(table_id)
        view.status = status
        self._refresh_display_text(view)
        self._repo.update(view)
        self._commit("status update", table_id=table_id)

        logger.info("Table view status changed", table_id=table_id, status=status.value)
        return self.to_output(view)

    def delete_with_message(self, table_id: int) -> str:
        self.delete(table_id)
        return f"Table view with ID {table_id} deleted successfully"

    # =========================================================================
    # Hooks
    # =========================================================================

    def _validate_create(self, dto: TableViewDTO) -> None:
        if self._repo.get_by_id(dto.table_id) is not None:
            raise DuplicateEntityError(
                "Table view with this ID already exists",
                table_id=dto.table_id,
            )

    def _build_entity(self, dto: TableViewDTO) -> TableViewRecord:
        view = TableViewRecord(**dto.model_dump())
        self._refresh_display_text(view)
        return view

    def _apply(self, entity: TableViewRecord, dto: TableViewDTO) -> None:
        super()._apply(entity, dto)
        self._refresh_display_text(entity)

    def _refresh_display_text(self, view: TableViewRecord) -> None:
        view.display_text = build_display_text(view, self._currency_symbol)

    def _seed_records(self) -> list[TableViewRecord]:
        records = table_view_records()
        for view in records:
            self._refresh_display_text(view)
        return records
