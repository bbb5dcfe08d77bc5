"""
Declarative field validation.

A RuleSet is an ordered list of (field, check, message, when) rules. Every
rule is evaluated, and every failure is collected and grouped under the
field's camelCase name, so one rejected request reports all of its problems
at once.

Checks receive the field value and return True when it is acceptable. All
checks except `required` accept None, so optional fields are only
constrained when present.

Usage:
    DISH_RULES = RuleSet(
        Rule("name", required, "Dish Name is required"),
        Rule("name", length(2, 100), "Dish Name must be between 2 and 100 characters"),
        Rule("price", greater_than(0), "Price must be greater than 0"),
    )

    DISH_RULES.check(dto)   # raises RequestValidationFailed
"""

from __future__ import annotations

import re
from collections.abc import Sized
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Callable

from email_validator import EmailNotValidError, validate_email
from pydantic.alias_generators import to_camel

from shared.utils.exceptions import RequestValidationFailed

Check = Callable[[Any], bool]
Guard = Callable[[Any], bool]


@dataclass(frozen=True)
class Rule:
    """One field predicate with its failure message and optional guard."""

    field: str
    check: Check
    message: str
    when: Guard | None = None
    label: str | None = None

    @property
    def error_key(self) -> str:
        return self.label or to_camel(self.field)

    def applies_to(self, obj: Any) -> bool:
        return self.when is None or bool(self.when(obj))

    def passes(self, obj: Any) -> bool:
        return bool(self.check(getattr(obj, self.field, None)))


class RuleSet:
    """Ordered, eagerly evaluated collection of rules for one DTO."""

    def __init__(self, *rules: Rule):
        self._rules: tuple[Rule, ...] = rules

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def validate(self, obj: Any) -> dict[str, list[str]]:
        """Evaluate every applicable rule and return field -> messages for the failures."""
        errors: dict[str, list[str]] = {}
        for rule in self._rules:
            if not rule.applies_to(obj):
                continue
            if not rule.passes(obj):
                errors.setdefault(rule.error_key, []).append(rule.message)
        return errors

    def is_valid(self, obj: Any) -> bool:
        return not self.validate(obj)

    def check(self, obj: Any, **log_context: Any) -> None:
        """
        Raise RequestValidationFailed listing every violation.

        Raises:
            RequestValidationFailed: If at least one rule fails.
        """
        errors = self.validate(obj)
        if errors:
            raise RequestValidationFailed(errors, **log_context)


# =============================================================================
# Checks
# =============================================================================


def required(value: Any) -> bool:
    """Present and not blank: no None, blank string, empty collection or zero."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, Sized):
        return len(value) > 0
    if isinstance(value, (int, float, Decimal)):
        return value != 0
    return True


def present(value: Any) -> bool:
    """Guard helper: the value was supplied."""
    return value is not None


def length(min_length: int, max_length: int) -> Check:
    def check(value: Any) -> bool:
        return value is None or min_length <= len(value) <= max_length

    return check


def max_length(limit: int) -> Check:
    def check(value: Any) -> bool:
        return value is None or len(value) <= limit

    return check


def matches(pattern: str) -> Check:
    compiled = re.compile(pattern)

    def check(value: Any) -> bool:
        return value is None or compiled.fullmatch(value) is not None

    return check


def greater_than(bound: int | Decimal) -> Check:
    def check(value: Any) -> bool:
        return value is None or value > bound

    return check


def at_least(bound: int | Decimal) -> Check:
    def check(value: Any) -> bool:
        return value is None or value >= bound

    return check


def at_most(bound: int | Decimal) -> Check:
    def check(value: Any) -> bool:
        return value is None or value <= bound

    return check


def max_decimal_places(places: int) -> Check:
    """
    Reject numbers with more than `places` significant fractional digits.
    Trailing zeros do not count: 10.500 has one decimal place.
    """

    def check(value: Any) -> bool:
        if value is None:
            return True
        try:
            number = value if isinstance(value, Decimal) else Decimal(str(value))
        except (InvalidOperation, ValueError):
            return False
        if not number.is_finite():
            return False
        exponent = number.normalize().as_tuple().exponent
        return -min(exponent, 0) <= places

    return check


def email_address(value: Any) -> bool:
    """Syntactic email check; no DNS lookup."""
    if value is None:
        return True
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True
