"""
Pydantic DTOs for the HTTP surface.

One DTO per resource serves as both request body and response. JSON keys are
camelCase; Python attributes match the ORM column names so responses build
straight from entities with model_validate().

Field types carry no length or range constraints and missing fields fall
back to zero values: business rules live in tiechef_api.validators so that
a rejected request reports every rule it breaks with a readable message.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, Field, PlainSerializer, field_validator
from pydantic.alias_generators import to_camel

from shared.config.constants import Limits, StaffRole, StaffType, TableViewStatus


# =============================================================================
# Common Types
# =============================================================================

# Decimal in Python, JSON number on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    """Base DTO: camelCase JSON, snake_case attributes, builds from ORM objects."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# Staff
# =============================================================================


class StaffDTO(CamelModel):
    """Employee."""

    staff_id: Optional[int] = None
    type: StaffType
    role: StaffRole
    full_name: str = ""
    phone_number: int = 0
    email: str = ""
    start_work_date: datetime = Field(default_factory=_utcnow)
    schedule_id: Optional[int] = None
    salary: Money = Decimal("0")
    kpi: Optional[str] = None


# =============================================================================
# Dish
# =============================================================================


class DishDTO(CamelModel):
    """Menu item."""

    dish_id: Optional[int] = None
    name: str = ""
    description: Optional[str] = None
    price: Money = Decimal("0")


# =============================================================================
# Receipt
# =============================================================================


class ReceiptDTO(CamelModel):
    """Table bill. dishIds behaves as a set: nulls dropped, duplicates collapsed."""

    receipt_id: Optional[int] = None
    table_id: int = 0
    staff_id: Optional[int] = None
    check_id: Optional[int] = None
    was_paid: bool = False
    dish_ids: list[int] = Field(default_factory=list)
    sum: Optional[Money] = None
    payment_date: Optional[datetime] = None

    @field_validator("dish_ids", mode="before")
    @classmethod
    def _normalize_dish_ids(cls, value):
        if value is None:
            return []
        if isinstance(value, (list, tuple, set)):
            return list(dict.fromkeys(v for v in value if v is not None))
        return value


# =============================================================================
# DiningTable
# =============================================================================


class DiningTableDTO(CamelModel):
    """Floor plan table."""

    dining_table_id: Optional[int] = None
    table_number: int = 0
    seats: int = 0
    x: Optional[int] = None
    y: Optional[int] = None
    width: int = Limits.DEFAULT_TABLE_WIDTH
    height: int = Limits.DEFAULT_TABLE_HEIGHT
    staff_id: Optional[int] = None


# =============================================================================
# TableView
# =============================================================================


class TableViewDTO(CamelModel):
    """Dashboard view of one table. displayText is computed by the server."""

    table_id: int = 0
    staff_name: Optional[str] = None
    was_paid: bool = False
    dish_count: int = 0
    sum: Optional[Money] = None
    payment_date: Optional[datetime] = None
    status: TableViewStatus = TableViewStatus.AVAILABLE
    display_text: str = ""


# =============================================================================
# Responses
# =============================================================================


class MessageResponse(BaseModel):
    """Plain confirmation body."""

    message: str


class SeedResult(BaseModel):
    """Outcome of an init-test-data call."""

    message: str
    created: int = 0
