"""
Receipt Model: the bill for one table visit.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import JSON, Boolean, DateTime, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, money_column_type


class Receipt(Base):
    """
    Bill for one table.

    dish_ids is a set of dish ids stored as a JSON array. The column is not
    mutation-tracked: always assign a new list instead of appending in place.
    """

    __tablename__ = "receipts"

    receipt_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    table_id: Mapped[int] = mapped_column(Integer, nullable=False)
    staff_id: Mapped[Optional[int]] = mapped_column(Integer)
    check_id: Mapped[Optional[int]] = mapped_column(Integer)
    was_paid: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    dish_ids: Mapped[list[int]] = mapped_column(JSON, default=list, nullable=False)
    sum: Mapped[Optional[Decimal]] = mapped_column(money_column_type())
    payment_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))

    __table_args__ = (
        Index("ix_receipt_was_paid", "was_paid"),
        Index("ix_receipt_staff_id", "staff_id"),
    )

    def has_dish(self, dish_id: int) -> bool:
        return dish_id in (self.dish_ids or [])
