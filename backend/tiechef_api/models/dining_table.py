"""
DiningTable Model: a table on the floor plan.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Index, Integer
from sqlalchemy.orm import Mapped, mapped_column

from shared.config.constants import Limits
from .base import Base


class DiningTable(Base):
    """
    Physical table with its floor plan placement.
    x/y are null until the table has been placed on the layout.
    """

    __tablename__ = "dining_tables"

    dining_table_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    table_number: Mapped[int] = mapped_column(Integer, nullable=False)
    seats: Mapped[int] = mapped_column(Integer, nullable=False)
    x: Mapped[Optional[int]] = mapped_column(Integer)
    y: Mapped[Optional[int]] = mapped_column(Integer)
    width: Mapped[int] = mapped_column(Integer, default=Limits.DEFAULT_TABLE_WIDTH, nullable=False)
    height: Mapped[int] = mapped_column(Integer, default=Limits.DEFAULT_TABLE_HEIGHT, nullable=False)
    staff_id: Mapped[Optional[int]] = mapped_column(Integer)

    __table_args__ = (
        Index("ix_dining_table_staff_id", "staff_id"),
    )
