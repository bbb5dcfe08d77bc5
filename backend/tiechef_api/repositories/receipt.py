"""
Receipt Repository - Data access for table bills.
"""

from typing import Sequence

from sqlalchemy.orm import Session

from tiechef_api.models import Receipt
from .base import Repository


class ReceiptRepository(Repository[Receipt]):
    """Repository for Receipt entities with payment and staff filters."""

    def __init__(self, session: Session):
        super().__init__(Receipt, session)

    def find_by_payment_status(self, was_paid: bool) -> Sequence[Receipt]:
        return self.find(Receipt.was_paid.is_(was_paid))

    def find_by_staff(self, staff_id: int) -> Sequence[Receipt]:
        return self.find(Receipt.staff_id == staff_id)


def get_receipt_repository(db: Session) -> ReceiptRepository:
    return ReceiptRepository(db)
