"""
Centralized constants for the backend application.
Avoids magic strings for staff categories, table view states and field limits.

Usage:
    from shared.config.constants import StaffRole, TableViewStatus

    if status == TableViewStatus.PAID:
        ...
"""

from enum import Enum
from typing import Final


# =============================================================================
# Staff
# =============================================================================


class StaffType(str, Enum):
    """Kind of work a staff member is hired for."""

    MANAGER = "Manager"
    TRAINER = "Trainer"
    NUTRITIONIST = "Nutritionist"
    CLEANER = "Cleaner"
    CHEF = "Chef"
    WAITER = "Waiter"


class StaffRole(str, Enum):
    """Role a staff member holds on the floor."""

    MANAGER = "Manager"
    TRAINER = "Trainer"
    NUTRITIONIST = "Nutritionist"
    CLEANER = "Cleaner"
    CHEF = "Chef"
    WAITER = "Waiter"
    ADMINISTRATOR = "Administrator"


# =============================================================================
# Table View
# =============================================================================


class TableViewStatus(str, Enum):
    """Occupancy state shown on the floor dashboard."""

    AVAILABLE = "Available"
    OCCUPIED = "Occupied"
    PAID = "Paid"
    RESERVED = "Reserved"


# =============================================================================
# Field Limits
# =============================================================================


class Limits:
    """Field length and layout limits shared by models and validation rules."""

    NAME_MIN_LENGTH: Final[int] = 2
    NAME_MAX_LENGTH: Final[int] = 100
    EMAIL_MAX_LENGTH: Final[int] = 100
    DESCRIPTION_MAX_LENGTH: Final[int] = 500
    KPI_MAX_LENGTH: Final[int] = 500
    MONEY_DECIMAL_PLACES: Final[int] = 2
    MIN_PHONE_NUMBER: Final[int] = 100000
    # Largest value an Integer column holds
    MAX_INTEGER: Final[int] = 2_147_483_647

    # DiningTable layout defaults (pixels on the floor plan)
    DEFAULT_TABLE_WIDTH: Final[int] = 100
    DEFAULT_TABLE_HEIGHT: Final[int] = 100
