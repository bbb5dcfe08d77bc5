"""
Dish Model: menu items.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from shared.config.constants import Limits
from .base import Base, money_column_type


class Dish(Base):
    """Menu item with a price in decimal(18,2)."""

    __tablename__ = "dishes"

    dish_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(Limits.NAME_MAX_LENGTH), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(Limits.DESCRIPTION_MAX_LENGTH))
    price: Mapped[Decimal] = mapped_column(money_column_type(), nullable=False)
