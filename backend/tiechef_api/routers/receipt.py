"""
Receipt endpoints: CRUD, payment toggle and dish set membership.
"""

from fastapi import APIRouter, Body, Depends, Request, Response, status
from sqlalchemy.orm import Session

from shared.infrastructure.db import get_db
from tiechef_api.schemas import MessageResponse, ReceiptDTO, SeedResult
from tiechef_api.services.domain import ReceiptService


router = APIRouter(prefix="/api/receipt", tags=["receipt"])


def _get_service(db: Session) -> ReceiptService:
    """Get ReceiptService instance."""
    return ReceiptService(db)


@router.get("", response_model=list[ReceiptDTO])
def list_receipts(db: Session = Depends(get_db)) -> list[ReceiptDTO]:
    return _get_service(db).list_all()


@router.get("/by-payment/{was_paid}", response_model=list[ReceiptDTO])
def list_receipts_by_payment(was_paid: bool, db: Session = Depends(get_db)) -> list[ReceiptDTO]:
    return _get_service(db).list_by_payment_status(was_paid)


@router.get("/by-staff/{staff_id}", response_model=list[ReceiptDTO])
def list_receipts_by_staff(staff_id: int, db: Session = Depends(get_db)) -> list[ReceiptDTO]:
    return _get_service(db).list_by_staff(staff_id)


@router.post("/init-test-data", response_model=SeedResult)
def init_receipt_test_data(db: Session = Depends(get_db)) -> SeedResult:
    return _get_service(db).seed()


@router.get("/{receipt_id}", response_model=ReceiptDTO)
def get_receipt(receipt_id: int, db: Session = Depends(get_db)) -> ReceiptDTO:
    return _get_service(db).get_by_id(receipt_id)


@router.post("", response_model=ReceiptDTO, status_code=status.HTTP_201_CREATED)
def create_receipt(
    body: ReceiptDTO,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
) -> ReceiptDTO:
    created = _get_service(db).create(body)
    response.headers["Location"] = str(
        request.url_for("get_receipt", receipt_id=created.receipt_id)
    )
    return created


@router.put("/{receipt_id}", response_model=ReceiptDTO)
def update_receipt(receipt_id: int, body: ReceiptDTO, db: Session = Depends(get_db)) -> ReceiptDTO:
    return _get_service(db).update(receipt_id, body)


@router.patch("/{receipt_id}/payment", response_model=ReceiptDTO)
def update_receipt_payment(
    receipt_id: int,
    paid: bool = Body(...),
    db: Session = Depends(get_db),
) -> ReceiptDTO:
    """
    Set the paid flag. Body is a bare JSON boolean.
    Marking paid stamps paymentDate; marking unpaid leaves it as it was.
    """
    return _get_service(db).set_payment_status(receipt_id, paid)


@router.post("/{receipt_id}/dishes/{dish_id}", response_model=ReceiptDTO)
def add_receipt_dish(receipt_id: int, dish_id: int, db: Session = Depends(get_db)) -> ReceiptDTO:
    return _get_service(db).add_dish(receipt_id, dish_id)


@router.delete("/{receipt_id}/dishes/{dish_id}", response_model=ReceiptDTO)
def remove_receipt_dish(receipt_id: int, dish_id: int, db: Session = Depends(get_db)) -> ReceiptDTO:
    return _get_service(db).remove_dish(receipt_id, dish_id)


@router.delete("/{receipt_id}", response_model=MessageResponse)
def delete_receipt(receipt_id: int, db: Session = Depends(get_db)) -> MessageResponse:
    return MessageResponse(message=_get_service(db).delete_with_message(receipt_id))
