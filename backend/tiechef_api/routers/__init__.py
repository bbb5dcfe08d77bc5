"""
Resource routers. Each router carries its own /api/<resource> prefix.
"""

from .staff import router as staff_router
from .dish import router as dish_router
from .receipt import router as receipt_router
from .dining_table import router as dining_table_router
from .table_view import router as table_view_router

__all__ = [
    "staff_router",
    "dish_router",
    "receipt_router",
    "dining_table_router",
    "table_view_router",
]
