"""
Staff Model: restaurant employees.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from shared.config.constants import Limits, StaffRole, StaffType
from .base import Base, money_column_type, str_enum_column_type


class Staff(Base):
    """
    Employee record.
    Email is unique by a write-time existence check, not a database constraint.
    """

    __tablename__ = "staff"

    staff_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    type: Mapped[StaffType] = mapped_column(str_enum_column_type(StaffType), nullable=False)
    role: Mapped[StaffRole] = mapped_column(str_enum_column_type(StaffRole), nullable=False)
    full_name: Mapped[str] = mapped_column(String(Limits.NAME_MAX_LENGTH), nullable=False)
    phone_number: Mapped[int] = mapped_column(Integer, nullable=False)
    email: Mapped[str] = mapped_column(String(Limits.EMAIL_MAX_LENGTH), nullable=False)
    start_work_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    schedule_id: Mapped[Optional[int]] = mapped_column(Integer)
    salary: Mapped[Decimal] = mapped_column(money_column_type(), nullable=False)
    kpi: Mapped[Optional[str]] = mapped_column(Text)

    __table_args__ = (
        Index("ix_staff_email", "email"),
        Index("ix_staff_type", "type"),
        Index("ix_staff_role", "role"),
    )
