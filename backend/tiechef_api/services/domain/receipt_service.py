"""
Receipt Service - table bills, payment and the dish set.

Narrow mutations (payment toggle, add/remove dish) re-check RECEIPT_RULES
against the resulting state before staging anything, so a paid receipt can
never end up without dishes.

Usage:
    service = ReceiptService(db)
    service.set_payment_status(receipt_id, True)
    service.add_dish(receipt_id, dish_id)
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from sqlalchemy.orm import Session

from shared.config.logging import get_logger
from tiechef_api.models import Receipt
from tiechef_api.repositories import ReceiptRepository
from tiechef_api.schemas import ReceiptDTO
from tiechef_api.seed import receipt_records
from tiechef_api.services.base_service import BaseCRUDService
from tiechef_api.validators import RECEIPT_RULES

logger = get_logger(__name__)


class ReceiptService(BaseCRUDService[Receipt, ReceiptDTO]):
    """
    Service for receipts.

    Business rules:
    - Paid receipts reference at least one dish
    - Marking a receipt paid stamps payment_date; marking it unpaid keeps it
    - dish_ids is a set: adding a present id or removing an absent one is a no-op
    """

    def __init__(self, db: Session):
        super().__init__(
            repo=ReceiptRepository(db),
            model=Receipt,
            dto_schema=ReceiptDTO,
            entity_name="Receipt",
            id_field="receipt_id",
            rules=RECEIPT_RULES,
        )

    # =========================================================================
    # Filters
    # =========================================================================

    def list_by_payment_status(self, was_paid: bool) -> list[ReceiptDTO]:
        return self._to_outputs(self._repo.find_by_payment_status(was_paid))

    def list_by_staff(self, staff_id: int) -> list[ReceiptDTO]:
        return self._to_outputs(self._repo.find_by_staff(staff_id))

    # =========================================================================
    # Narrow mutations
    # =========================================================================

    def set_payment_status(self, receipt_id: int, paid: bool) -> ReceiptDTO:
        """
        Set the paid flag. Stamps the current time as payment date when it becomes paid;
        repeating a paid call keeps the original payment date.

        Raises:
            NotFoundError: If receipt not found.
            RequestValidationFailed: If a receipt without dishes is marked paid.
        """
        receipt = self.get_entity(receipt_id)
        changes: dict[str, Any] = {"was_paid": paid}
        if paid and (not receipt.was_paid or receipt.payment_date is None):
            changes["payment_date"] = datetime.now(timezone.utc)

        self._check_result(receipt, changes)
        for field_name, value in changes.items():
            setattr(receipt, field_name, value)
        self._commit("payment update", receipt_id=receipt_id)

        logger.info("Receipt payment status changed", receipt_id=receipt_id, paid=paid)
        return self.to_output(receipt)

    def add_dish(self, receipt_id: int, dish_id: int) -> ReceiptDTO:
        """Add a dish id to the receipt. No commit when it is already there."""
        receipt = self.get_entity(receipt_id)
        if receipt.has_dish(dish_id):
            return self.to_output(receipt)

        receipt.dish_ids = [*receipt.dish_ids, dish_id]
        self._commit("dish add", receipt_id=receipt_id, dish_id=dish_id)

        logger.info("Dish added to receipt", receipt_id=receipt_id, dish_id=dish_id)
        return self.to_output(receipt)

    def remove_dish(self, receipt_id: int, dish_id: int) -> ReceiptDTO:
        """
        Remove a dish id from the receipt. No commit when it is absent.

        Raises:
            NotFoundError: If receipt not found.
            RequestValidationFailed: If the last dish of a paid receipt is removed.
        """
        receipt = self.get_entity(receipt_id)
        if not receipt.has_dish(dish_id):
            return self.to_output(receipt)

        remaining = [d for d in receipt.dish_ids if d != dish_id]
        self._check_result(receipt, {"dish_ids": remaining})
        receipt.dish_ids = remaining
        self._commit("dish removal", receipt_id=receipt_id, dish_id=dish_id)

        logger.info("Dish removed from receipt", receipt_id=receipt_id, dish_id=dish_id)
        return self.to_output(receipt)

    def delete_with_message(self, receipt_id: int) -> str:
        self.delete(receipt_id)
        return f"Receipt with ID {receipt_id} deleted successfully"

    def _check_result(self, receipt: Receipt, changes: dict[str, Any]) -> None:
        candidate = self.to_output(receipt).model_copy(update=changes)
        self._rules.check(candidate, entity=self._entity_name, receipt_id=receipt.receipt_id)

    def _seed_records(self) -> list[Receipt]:
        return receipt_records()
