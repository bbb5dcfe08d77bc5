"""
Table view (floor dashboard) endpoints.

Backed by the process-wide in-memory store, not the database.
"""

from fastapi import APIRouter, Body, Depends, Request, Response, status

from shared.config.constants import TableViewStatus
from tiechef_api.models import TableViewRecord
from tiechef_api.repositories import InMemoryStore, get_table_view_store
from tiechef_api.schemas import MessageResponse, SeedResult, TableViewDTO
from tiechef_api.services.domain import TableViewService


router = APIRouter(prefix="/api/tableview", tags=["table-view"])


def _get_service(
    store: InMemoryStore[TableViewRecord] = Depends(get_table_view_store),
) -> TableViewService:
    """Get TableViewService instance over the shared store."""
    return TableViewService(store)


@router.get("", response_model=list[TableViewDTO])
def list_table_views(service: TableViewService = Depends(_get_service)) -> list[TableViewDTO]:
    return service.list_all()


@router.get("/by-status/{view_status}", response_model=list[TableViewDTO])
def list_table_views_by_status(
    view_status: TableViewStatus,
    service: TableViewService = Depends(_get_service),
) -> list[TableViewDTO]:
    return service.list_by_status(view_status)


@router.get("/by-staff/{staff_name}", response_model=list[TableViewDTO])
def list_table_views_by_staff(
    staff_name: str,
    service: TableViewService = Depends(_get_service),
) -> list[TableViewDTO]:
    """Tables served by a staff member; the name match ignores case."""
    return service.list_by_staff_name(staff_name)


@router.get("/available", response_model=list[TableViewDTO])
def list_available_tables(service: TableViewService = Depends(_get_service)) -> list[TableViewDTO]:
    return service.list_by_status(TableViewStatus.AVAILABLE)


@router.get("/occupied", response_model=list[TableViewDTO])
def list_occupied_tables(service: TableViewService = Depends(_get_service)) -> list[TableViewDTO]:
    return service.list_by_status(TableViewStatus.OCCUPIED)


@router.get("/paid", response_model=list[TableViewDTO])
def list_paid_tables(service: TableViewService = Depends(_get_service)) -> list[TableViewDTO]:
    return service.list_by_status(TableViewStatus.PAID)


@router.post("/init-test-data", response_model=SeedResult)
def init_table_view_test_data(service: TableViewService = Depends(_get_service)) -> SeedResult:
    return service.seed()


@router.get("/{table_id}", response_model=TableViewDTO)
def get_table_view(table_id: int, service: TableViewService = Depends(_get_service)) -> TableViewDTO:
    return service.get_by_id(table_id)


@router.post("", response_model=TableViewDTO, status_code=status.HTTP_201_CREATED)
def create_table_view(
    body: TableViewDTO,
    request: Request,
    response: Response,
    service: TableViewService = Depends(_get_service),
) -> TableViewDTO:
    """Create a table view. The table id comes from the body and must be unused."""
    created = service.create(body)
    response.headers["Location"] = str(request.url_for("get_table_view", table_id=created.table_id))
    return created


@router.put("/{table_id}", response_model=TableViewDTO)
def update_table_view(
    table_id: int,
    body: TableViewDTO,
    service: TableViewService = Depends(_get_service),
) -> TableViewDTO:
    return service.update(table_id, body)


@router.patch("/{table_id}/status", response_model=TableViewDTO)
def update_table_view_status(
    table_id: int,
    view_status: TableViewStatus = Body(...),
    service: TableViewService = Depends(_get_service),
) -> TableViewDTO:
    """Set the status. Body is a bare JSON string such as "Occupied"."""
    return service.set_status(table_id, view_status)


@router.delete("/{table_id}", response_model=MessageResponse)
def delete_table_view(table_id: int, service: TableViewService = Depends(_get_service)) -> MessageResponse:
    return MessageResponse(message=service.delete_with_message(table_id))
