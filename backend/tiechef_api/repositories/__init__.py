"""
Repository Pattern implementation.

Relational repositories share the request Session as their unit of work;
TableView uses the in-memory backend with the same contract.

Usage:
    from tiechef_api.repositories import get_receipt_repository

    repo = get_receipt_repository(db)
    unpaid = repo.find_by_payment_status(False)
"""

from .base import Repository
from .memory import InMemoryRepository, InMemoryStore
from .staff import StaffRepository, get_staff_repository
from .dish import DishRepository, get_dish_repository
from .receipt import ReceiptRepository, get_receipt_repository
from .dining_table import DiningTableRepository, get_dining_table_repository
from .table_view import TableViewRepository, get_table_view_store, table_view_store

__all__ = [
    # Base
    "Repository",
    "InMemoryRepository",
    "InMemoryStore",
    # Staff
    "StaffRepository",
    "get_staff_repository",
    # Dish
    "DishRepository",
    "get_dish_repository",
    # Receipt
    "ReceiptRepository",
    "get_receipt_repository",
    # DiningTable
    "DiningTableRepository",
    "get_dining_table_repository",
    # TableView
    "TableViewRepository",
    "get_table_view_store",
    "table_view_store",
]
