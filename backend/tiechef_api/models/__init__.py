"""
ORM models and in-memory records.

Re-exports every model so `from tiechef_api.models import Dish` works and
Base.metadata sees all tables before create_all().
"""

from .base import Base
from .staff import Staff
from .dish import Dish
from .receipt import Receipt
from .dining_table import DiningTable
from .table_view import TableViewRecord

__all__ = [
    "Base",
    "Staff",
    "Dish",
    "Receipt",
    "DiningTable",
    "TableViewRecord",
]
