"""
Service layer: the shared CRUD pipeline and one domain service per resource.
"""

from .base_service import BaseCRUDService
from .domain import (
    DiningTableService,
    DishService,
    ReceiptService,
    StaffService,
    TableViewService,
    build_display_text,
    get_dish_cache,
)

__all__ = [
    "BaseCRUDService",
    "StaffService",
    "DishService",
    "get_dish_cache",
    "ReceiptService",
    "DiningTableService",
    "TableViewService",
    "build_display_text",
]
