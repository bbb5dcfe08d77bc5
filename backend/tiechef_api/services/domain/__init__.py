"""
Domain Services - application layer.

Structure:
    Router (thin controller)
        ↓
    Service (validation, business rules)  ← YOU ARE HERE
        ↓
    Repository (unit of work)
        ↓
    Model (entity)

Usage:
    from tiechef_api.services.domain import ReceiptService

    # In router
    service = ReceiptService(db)
    unpaid = service.list_by_payment_status(False)
"""

from .staff_service import StaffService
from .dish_service import DishService, get_dish_cache
from .receipt_service import ReceiptService
from .dining_table_service import DiningTableService
from .table_view_service import TableViewService, build_display_text

__all__ = [
    "StaffService",
    "DishService",
    "get_dish_cache",
    "ReceiptService",
    "DiningTableService",
    "TableViewService",
    "build_display_text",
]
