"""
Rule sets for every writable DTO.

Messages are part of the API contract: clients match on them.
"""

from shared.config.constants import Limits
from shared.utils.validators import (
    Rule,
    RuleSet,
    at_least,
    at_most,
    email_address,
    greater_than,
    length,
    matches,
    max_decimal_places,
    max_length,
    present,
    required,
)

_NAME_BOUNDS = (Limits.NAME_MIN_LENGTH, Limits.NAME_MAX_LENGTH)
_MONEY_PLACES = Limits.MONEY_DECIMAL_PLACES
_MAX_INT = Limits.MAX_INTEGER


STAFF_RULES = RuleSet(
    Rule("full_name", required, "Full Name is required"),
    Rule("full_name", length(*_NAME_BOUNDS), "Full Name must be between 2 and 100 characters"),
    Rule("full_name", matches(r"^[a-zA-Z\s]+$"), "Full Name must contain only letters and spaces"),
    Rule("email", required, "Email is required"),
    Rule("email", email_address, "Invalid Email format"),
    Rule("email", max_length(Limits.EMAIL_MAX_LENGTH), "Email must not exceed 100 characters"),
    Rule("phone_number", required, "Phone Number is required"),
    Rule("phone_number", greater_than(Limits.MIN_PHONE_NUMBER), "Phone Number must be valid"),
    Rule("phone_number", at_most(_MAX_INT), "Phone Number must be valid"),
    Rule("salary", greater_than(0), "Salary must be greater than 0"),
    Rule("salary", max_decimal_places(_MONEY_PLACES), "Salary cannot have more than 2 decimal places"),
    Rule("kpi", max_length(Limits.KPI_MAX_LENGTH), "KPI must not exceed 500 characters"),
    Rule("schedule_id", at_most(_MAX_INT), "Schedule ID must not exceed 2147483647"),
)


DISH_RULES = RuleSet(
    Rule("name", required, "Dish Name is required"),
    Rule("name", length(*_NAME_BOUNDS), "Dish Name must be between 2 and 100 characters"),
    Rule("price", greater_than(0), "Price must be greater than 0"),
    Rule("price", max_decimal_places(_MONEY_PLACES), "Price cannot have more than 2 decimal places"),
    Rule(
        "description",
        max_length(Limits.DESCRIPTION_MAX_LENGTH),
        "Description must not exceed 500 characters",
    ),
)


RECEIPT_RULES = RuleSet(
    Rule("table_id", greater_than(0), "Table ID must be greater than 0"),
    Rule("table_id", at_most(_MAX_INT), "Table ID must not exceed 2147483647"),
    Rule(
        "staff_id",
        greater_than(0),
        "Staff ID must be greater than 0",
        when=lambda receipt: present(receipt.staff_id),
    ),
    Rule("staff_id", at_most(_MAX_INT), "Staff ID must not exceed 2147483647"),
    Rule("check_id", at_most(_MAX_INT), "Check ID must not exceed 2147483647"),
    Rule("sum", at_least(0), "Sum cannot be negative"),
    Rule("sum", max_decimal_places(_MONEY_PLACES), "Sum cannot have more than 2 decimal places"),
    Rule(
        "dish_ids",
        required,
        "Paid receipt must contain dishes",
        when=lambda receipt: receipt.was_paid,
    ),
)


DINING_TABLE_RULES = RuleSet(
    Rule("table_number", greater_than(0), "Table Number must be greater than 0"),
    Rule("table_number", at_most(_MAX_INT), "Table Number must not exceed 2147483647"),
    Rule("seats", greater_than(0), "Seats must be greater than 0"),
    Rule("seats", at_most(_MAX_INT), "Seats must not exceed 2147483647"),
    Rule("width", greater_than(0), "Width must be greater than 0"),
    Rule("width", at_most(_MAX_INT), "Width must not exceed 2147483647"),
    Rule("height", greater_than(0), "Height must be greater than 0"),
    Rule("height", at_most(_MAX_INT), "Height must not exceed 2147483647"),
    Rule("x", at_most(_MAX_INT), "X must not exceed 2147483647"),
    Rule("y", at_most(_MAX_INT), "Y must not exceed 2147483647"),
    Rule(
        "staff_id",
        greater_than(0),
        "Staff ID must be greater than 0",
        when=lambda table: present(table.staff_id),
    ),
    Rule("staff_id", at_most(_MAX_INT), "Staff ID must not exceed 2147483647"),
)


TABLE_VIEW_RULES = RuleSet(
    Rule("table_id", greater_than(0), "Table ID must be greater than 0"),
    Rule("table_id", at_most(_MAX_INT), "Table ID must not exceed 2147483647"),
    Rule("staff_name", max_length(Limits.NAME_MAX_LENGTH), "Staff Name must not exceed 100 characters"),
    Rule("dish_count", at_least(0), "Dish Count cannot be negative"),
    Rule("sum", at_least(0), "Sum cannot be negative"),
    Rule("sum", max_decimal_places(_MONEY_PLACES), "Sum cannot have more than 2 decimal places"),
)
