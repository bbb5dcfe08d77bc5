"""
TableView Repository - floor dashboard state kept in process memory.
"""

from shared.config.constants import TableViewStatus
from tiechef_api.models import TableViewRecord
from .memory import InMemoryRepository, InMemoryStore

# Process-wide store; every request opens its own repository over it
table_view_store: InMemoryStore[TableViewRecord] = InMemoryStore("table_id")


class TableViewRepository(InMemoryRepository[TableViewRecord]):
    """Repository for TableView records with status and staff filters."""

    def find_by_status(self, status: TableViewStatus) -> list[TableViewRecord]:
        return self.find(lambda view: view.status == status)

    def find_by_staff_name(self, staff_name: str) -> list[TableViewRecord]:
        """Case-insensitive match on the assigned staff name."""
        wanted = staff_name.casefold()
        return self.find(
            lambda view: view.staff_name is not None and view.staff_name.casefold() == wanted
        )


def get_table_view_store() -> InMemoryStore[TableViewRecord]:
    """FastAPI dependency returning the process-wide TableView store."""
    return table_view_store
