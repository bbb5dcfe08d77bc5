"""
Sample data for the init-test-data endpoints.

Each factory returns fresh, unsaved records so repeated calls never share
instances. Records carry no ids: the store assigns them, except for table
views whose ids are chosen by the client.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from shared.config.constants import StaffRole, StaffType, TableViewStatus
from tiechef_api.models import DiningTable, Dish, Receipt, Staff, TableViewRecord


def staff_records() -> list[Staff]:
    now = datetime.now(timezone.utc)
    return [
        Staff(
            type=StaffType.MANAGER,
            role=StaffRole.ADMINISTRATOR,
            full_name="Ivan Petrov",
            phone_number=123456789,
            email="ivan.petrov@tiechef.com",
            start_work_date=now - timedelta(days=365),
            schedule_id=1,
            salary=Decimal("50000.00"),
            kpi="95%",
        ),
        Staff(
            type=StaffType.WAITER,
            role=StaffRole.WAITER,
            full_name="Maria Sidorova",
            phone_number=987654321,
            email="maria.sidorova@tiechef.com",
            start_work_date=now - timedelta(days=180),
            schedule_id=2,
            salary=Decimal("35000.00"),
            kpi="88%",
        ),
        Staff(
            type=StaffType.CHEF,
            role=StaffRole.CHEF,
            full_name="Alexey Kozlov",
            phone_number=555555555,
            email="alexey.kozlov@tiechef.com",
            start_work_date=now - timedelta(days=90),
            schedule_id=3,
            salary=Decimal("40000.00"),
            kpi="92%",
        ),
    ]


def dish_records() -> list[Dish]:
    return [
        Dish(name="Borscht", description="Beetroot soup with sour cream", price=Decimal("7.50")),
        Dish(name="Caesar Salad", description="Romaine, croutons, parmesan", price=Decimal("9.90")),
        Dish(name="Chicken Kyiv", description="Breaded chicken with herb butter", price=Decimal("14.25")),
        Dish(name="Pelmeni", description="Meat dumplings", price=Decimal("11.00")),
        Dish(name="Syrniki", description="Cottage cheese pancakes", price=Decimal("6.40")),
    ]


def receipt_records() -> list[Receipt]:
    return [
        Receipt(
            table_id=1,
            staff_id=1,
            check_id=101,
            was_paid=False,
            dish_ids=[1, 2, 3],
            sum=Decimal("150.50"),
        ),
        Receipt(
            table_id=2,
            staff_id=2,
            check_id=102,
            was_paid=True,
            dish_ids=[4, 5],
            sum=Decimal("89.99"),
            payment_date=datetime.now(timezone.utc) - timedelta(hours=2),
        ),
        Receipt(
            table_id=3,
            was_paid=False,
            dish_ids=[],
        ),
    ]


def dining_table_records() -> list[DiningTable]:
    return [
        DiningTable(table_number=1, seats=2, x=40, y=40, staff_id=2),
        DiningTable(table_number=2, seats=4, x=200, y=40, staff_id=2),
        DiningTable(table_number=3, seats=4, x=360, y=40),
        DiningTable(table_number=4, seats=6, width=160),
    ]


def table_view_records() -> list[TableViewRecord]:
    return [
        TableViewRecord(
            table_id=1,
            staff_name="Ivan Petrov",
            was_paid=False,
            dish_count=3,
            sum=Decimal("150.50"),
            status=TableViewStatus.OCCUPIED,
        ),
        TableViewRecord(
            table_id=2,
            staff_name="Maria Sidorova",
            was_paid=True,
            dish_count=2,
            sum=Decimal("89.99"),
            payment_date=datetime.now(timezone.utc) - timedelta(hours=1),
            status=TableViewStatus.PAID,
        ),
        TableViewRecord(
            table_id=3,
            status=TableViewStatus.AVAILABLE,
        ),
    ]
