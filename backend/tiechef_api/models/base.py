"""
Base class and shared column types for all SQLAlchemy ORM models.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any

from sqlalchemy import Enum as SAEnum, Numeric
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all models."""

    def __repr__(self) -> str:
        class_name = self.__class__.__name__
        pk = ", ".join(
            f"{col.key}={getattr(self, col.key, None)}"
            for col in self.__mapper__.primary_key
        )
        return f"<{class_name}({pk})>"


def money_column_type() -> Numeric[Decimal]:
    """decimal(18,2) returned as Decimal."""
    return Numeric(18, 2, asdecimal=True)


def str_enum_column_type(enum_cls: type[Enum], **kwargs: Any) -> SAEnum:
    """
    Store an enum by its value ("Manager") rather than its member name,
    as VARCHAR so adding a member needs no type migration.
    """
    return SAEnum(
        enum_cls,
        native_enum=False,
        length=32,
        values_callable=lambda members: [m.value for m in members],
        **kwargs,
    )
