"""
Tests for receipt endpoints and ReceiptService.

Covers CRUD, the paid-needs-dishes rule, payment toggling and idempotent
dish set membership.
"""

from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from shared.utils.exceptions import RequestValidationFailed
from tiechef_api.models import Receipt
from tiechef_api.services.domain import ReceiptService


def _receipt(**overrides):
    payload = {"tableId": 4, "staffId": 2, "checkId": 104, "wasPaid": False, "dishIds": [], "sum": None}
    payload.update(overrides)
    return payload


class TestReceiptCrud:
    """Receipt CRUD through the API."""

    def test_unpaid_without_dishes_is_accepted(self, client):
        response = client.post("/api/receipt", json=_receipt())
        assert response.status_code == 201

        data = response.json()
        assert data["receiptId"] > 0
        assert data["dishIds"] == []
        assert data["wasPaid"] is False
        assert response.headers["Location"].endswith(f"/api/receipt/{data['receiptId']}")

    def test_paid_without_dishes_is_rejected(self, client):
        response = client.post("/api/receipt", json=_receipt(wasPaid=True))
        assert response.status_code == 400
        assert response.json()["detail"]["errors"] == {"dishIds": ["Paid receipt must contain dishes"]}

    def test_dish_ids_behave_as_a_set(self, client):
        data = client.post("/api/receipt", json=_receipt(dishIds=[3, 1, 3, 2, 1])).json()
        assert data["dishIds"] == [3, 1, 2]

    def test_field_rules(self, client):
        body = _receipt(tableId=0, staffId=-1, sum=-5.125)
        errors = client.post("/api/receipt", json=body).json()["detail"]["errors"]

        assert errors["tableId"] == ["Table ID must be greater than 0"]
        assert errors["staffId"] == ["Staff ID must be greater than 0"]
        assert errors["sum"] == [
            "Sum cannot be negative",
            "Sum cannot have more than 2 decimal places",
        ]

    def test_missing_staff_is_allowed(self, client):
        response = client.post("/api/receipt", json=_receipt(staffId=None))
        assert response.status_code == 201
        assert response.json()["staffId"] is None

    def test_update(self, client, seed_receipt):
        body = _receipt(receiptId=seed_receipt.receipt_id, tableId=7, dishIds=[9], sum=12.5)
        response = client.put(f"/api/receipt/{seed_receipt.receipt_id}", json=body)
        assert response.status_code == 200

        data = response.json()
        assert data["tableId"] == 7
        assert data["dishIds"] == [9]
        assert data["sum"] == 12.5

    def test_delete_returns_message(self, client, seed_receipt):
        receipt_id = seed_receipt.receipt_id
        response = client.delete(f"/api/receipt/{receipt_id}")
        assert response.status_code == 200
        assert response.json() == {"message": f"Receipt with ID {receipt_id} deleted successfully"}

    def test_filters(self, client):
        client.post("/api/receipt/init-test-data")

        paid = client.get("/api/receipt/by-payment/true").json()
        unpaid = client.get("/api/receipt/by-payment/false").json()
        assert [r["checkId"] for r in paid] == [102]
        assert len(unpaid) == 2

        by_staff = client.get("/api/receipt/by-staff/1").json()
        assert [r["tableId"] for r in by_staff] == [1]


class TestReceiptPayment:
    """PATCH {id}/payment with a bare JSON boolean."""

    def test_mark_paid_stamps_payment_date(self, client, seed_receipt):
        before = datetime.now(timezone.utc).replace(tzinfo=None)
        response = client.patch(f"/api/receipt/{seed_receipt.receipt_id}/payment", json=True)
        assert response.status_code == 200

        data = response.json()
        assert data["wasPaid"] is True
        stamped = datetime.fromisoformat(data["paymentDate"]).replace(tzinfo=None)
        assert stamped >= before.replace(microsecond=0)

    def test_mark_unpaid_keeps_payment_date(self, client, seed_receipt):
        url = f"/api/receipt/{seed_receipt.receipt_id}/payment"
        paid_at = client.patch(url, json=True).json()["paymentDate"]

        data = client.patch(url, json=False).json()
        assert data["wasPaid"] is False
        assert data["paymentDate"] == paid_at

    def test_repeated_paid_keeps_first_payment_date(self, client, seed_receipt):
        url = f"/api/receipt/{seed_receipt.receipt_id}/payment"
        first = client.patch(url, json=True).json()["paymentDate"]

        second = client.patch(url, json=True).json()
        assert second["wasPaid"] is True
        assert second["paymentDate"] == first

    def test_paid_receipt_without_date_gets_stamped(self, db_session):
        receipt = Receipt(table_id=2, was_paid=True, dish_ids=[1])
        db_session.add(receipt)
        db_session.commit()

        result = ReceiptService(db_session).set_payment_status(receipt.receipt_id, True)
        assert result.payment_date is not None

    def test_mark_paid_without_dishes_is_rejected(self, client):
        receipt = client.post("/api/receipt", json=_receipt()).json()
        response = client.patch(f"/api/receipt/{receipt['receiptId']}/payment", json=True)

        assert response.status_code == 400
        assert client.get(f"/api/receipt/{receipt['receiptId']}").json()["wasPaid"] is False

    def test_missing_receipt(self, client):
        assert client.patch("/api/receipt/77/payment", json=True).status_code == 404


class TestReceiptDishes:
    """Dish set membership is idempotent."""

    def test_add_dish_twice(self, client, seed_receipt):
        url = f"/api/receipt/{seed_receipt.receipt_id}/dishes/5"
        client.post(url)
        data = client.post(url).json()

        assert data["dishIds"].count(5) == 1
        assert data["dishIds"] == [1, 2, 5]

    def test_remove_dish(self, client, seed_receipt):
        data = client.delete(f"/api/receipt/{seed_receipt.receipt_id}/dishes/1").json()
        assert data["dishIds"] == [2]

    def test_remove_absent_dish_skips_commit(self, db_session, seed_receipt):
        service = ReceiptService(db_session)
        with patch.object(service.repo, "commit", wraps=service.repo.commit) as commit:
            result = service.remove_dish(seed_receipt.receipt_id, 7)

        assert result.dish_ids == [1, 2]
        commit.assert_not_called()

    def test_add_present_dish_skips_commit(self, db_session, seed_receipt):
        service = ReceiptService(db_session)
        with patch.object(service.repo, "commit", wraps=service.repo.commit) as commit:
            service.add_dish(seed_receipt.receipt_id, 2)

        commit.assert_not_called()

    def test_add_dish_commits_once(self, db_session, seed_receipt):
        service = ReceiptService(db_session)
        with patch.object(service.repo, "commit", wraps=service.repo.commit) as commit:
            service.add_dish(seed_receipt.receipt_id, 8)

        commit.assert_called_once()
        db_session.expire_all()
        assert service.get_by_id(seed_receipt.receipt_id).dish_ids == [1, 2, 8]

    def test_removing_last_dish_of_paid_receipt_is_rejected(self, db_session, seed_receipt):
        service = ReceiptService(db_session)
        receipt_id = seed_receipt.receipt_id
        service.remove_dish(receipt_id, 1)
        service.set_payment_status(receipt_id, True)

        with pytest.raises(RequestValidationFailed) as exc_info:
            service.remove_dish(receipt_id, 2)

        assert exc_info.value.errors == {"dishIds": ["Paid receipt must contain dishes"]}

    def test_missing_receipt(self, client):
        assert client.post("/api/receipt/404/dishes/1").status_code == 404


class TestReceiptSeed:
    def test_seed(self, client):
        response = client.post("/api/receipt/init-test-data")
        assert response.json()["created"] == 3

        receipts = client.get("/api/receipt").json()
        assert [r["wasPaid"] for r in receipts] == [False, True, False]
        assert receipts[1]["paymentDate"] is not None
