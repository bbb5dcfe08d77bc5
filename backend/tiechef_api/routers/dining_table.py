"""
Dining table endpoints, including the floor plan reset.
"""

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from shared.infrastructure.db import get_db
from tiechef_api.schemas import DiningTableDTO, SeedResult
from tiechef_api.services.domain import DiningTableService


router = APIRouter(prefix="/api/diningtable", tags=["dining-table"])


def _get_service(db: Session) -> DiningTableService:
    """Get DiningTableService instance."""
    return DiningTableService(db)


@router.get("", response_model=list[DiningTableDTO])
def list_dining_tables(db: Session = Depends(get_db)) -> list[DiningTableDTO]:
    return _get_service(db).list_all()


@router.get("/by-staff/{staff_id}", response_model=list[DiningTableDTO])
def list_dining_tables_by_staff(staff_id: int, db: Session = Depends(get_db)) -> list[DiningTableDTO]:
    return _get_service(db).list_by_staff(staff_id)


@router.post("/init-test-data", response_model=SeedResult)
def init_dining_table_test_data(db: Session = Depends(get_db)) -> SeedResult:
    return _get_service(db).seed()


@router.post("/reset", status_code=status.HTTP_204_NO_CONTENT)
def reset_layout(db: Session = Depends(get_db)) -> None:
    """Remove every table from the floor plan (x and y cleared)."""
    _get_service(db).reset_layout()


@router.get("/{dining_table_id}", response_model=DiningTableDTO)
def get_dining_table(dining_table_id: int, db: Session = Depends(get_db)) -> DiningTableDTO:
    return _get_service(db).get_by_id(dining_table_id)


@router.post("", response_model=DiningTableDTO, status_code=status.HTTP_201_CREATED)
def create_dining_table(
    body: DiningTableDTO,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
) -> DiningTableDTO:
    created = _get_service(db).create(body)
    response.headers["Location"] = str(
        request.url_for("get_dining_table", dining_table_id=created.dining_table_id)
    )
    return created


@router.put("/{dining_table_id}", response_model=DiningTableDTO)
def update_dining_table(
    dining_table_id: int,
    body: DiningTableDTO,
    db: Session = Depends(get_db),
) -> DiningTableDTO:
    return _get_service(db).update(dining_table_id, body)


@router.delete("/{dining_table_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_dining_table(dining_table_id: int, db: Session = Depends(get_db)) -> None:
    _get_service(db).delete(dining_table_id)
