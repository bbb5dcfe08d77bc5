"""
TableView record: floor dashboard state for one table.

Not persisted in the database; lives in the in-memory store. The table id
is chosen by the client.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from shared.config.constants import TableViewStatus


@dataclass
class TableViewRecord:
    table_id: int
    staff_name: Optional[str] = None
    was_paid: bool = False
    dish_count: int = 0
    sum: Optional[Decimal] = None
    payment_date: Optional[datetime] = None
    status: TableViewStatus = TableViewStatus.AVAILABLE
    display_text: str = ""
