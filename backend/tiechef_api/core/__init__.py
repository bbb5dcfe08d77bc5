"""
Application core: lifespan, CORS, middlewares and exception handlers.
"""

from .cors import configure_cors, get_cors_origins
from .errors import register_exception_handlers
from .lifespan import lifespan
from .middlewares import register_middlewares

__all__ = [
    "configure_cors",
    "get_cors_origins",
    "register_exception_handlers",
    "lifespan",
    "register_middlewares",
]
