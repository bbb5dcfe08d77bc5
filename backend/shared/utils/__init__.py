"""
Utilities module: Exceptions, validation rules.
"""

from shared.utils.exceptions import (
    NotFoundError,
    ValidationError,
    RequestValidationFailed,
    DuplicateEntityError,
    IdMismatchError,
    DatabaseError,
)
from shared.utils.validators import Rule, RuleSet

__all__ = [
    # exceptions
    "NotFoundError",
    "ValidationError",
    "RequestValidationFailed",
    "DuplicateEntityError",
    "IdMismatchError",
    "DatabaseError",
    # validators
    "Rule",
    "RuleSet",
]
