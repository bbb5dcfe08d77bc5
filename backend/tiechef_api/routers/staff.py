"""
Staff endpoints.

Thin router that delegates to StaffService.
"""

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from shared.config.constants import StaffRole, StaffType
from shared.infrastructure.db import get_db
from tiechef_api.schemas import MessageResponse, SeedResult, StaffDTO
from tiechef_api.services.domain import StaffService


router = APIRouter(prefix="/api/staff", tags=["staff"])


def _get_service(db: Session) -> StaffService:
    """Get StaffService instance."""
    return StaffService(db)


@router.get("", response_model=list[StaffDTO])
def list_staff(db: Session = Depends(get_db)) -> list[StaffDTO]:
    return _get_service(db).list_all()


@router.get("/by-type/{staff_type}", response_model=list[StaffDTO])
def list_staff_by_type(staff_type: StaffType, db: Session = Depends(get_db)) -> list[StaffDTO]:
    return _get_service(db).list_by_type(staff_type)


@router.get("/by-role/{role}", response_model=list[StaffDTO])
def list_staff_by_role(role: StaffRole, db: Session = Depends(get_db)) -> list[StaffDTO]:
    return _get_service(db).list_by_role(role)


@router.post("/init-test-data", response_model=SeedResult)
def init_staff_test_data(db: Session = Depends(get_db)) -> SeedResult:
    """Seed three staff members unless any staff exist."""
    return _get_service(db).seed()


@router.get("/{staff_id}", response_model=StaffDTO)
def get_staff(staff_id: int, db: Session = Depends(get_db)) -> StaffDTO:
    return _get_service(db).get_by_id(staff_id)


@router.post("", response_model=StaffDTO, status_code=status.HTTP_201_CREATED)
def create_staff(
    body: StaffDTO,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
) -> StaffDTO:
    """
    Create a staff member.

    Rejects with 400 when a field rule fails or the email is already in use.
    """
    created = _get_service(db).create(body)
    response.headers["Location"] = str(request.url_for("get_staff", staff_id=created.staff_id))
    return created


@router.put("/{staff_id}", response_model=StaffDTO)
def update_staff(staff_id: int, body: StaffDTO, db: Session = Depends(get_db)) -> StaffDTO:
    """Replace a staff member. Keeping the member's own email is allowed."""
    return _get_service(db).update(staff_id, body)


@router.delete("/{staff_id}", response_model=MessageResponse)
def delete_staff(staff_id: int, db: Session = Depends(get_db)) -> MessageResponse:
    return MessageResponse(message=_get_service(db).delete_with_message(staff_id))
