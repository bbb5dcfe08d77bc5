"""
Staff Service - employee management.

Usage:
    from tiechef_api.services.domain import StaffService

    service = StaffService(db)
    waiters = service.list_by_type(StaffType.WAITER)
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from shared.config.constants import StaffRole, StaffType
from shared.config.logging import get_logger, mask_email
from shared.utils.exceptions import DuplicateEntityError
from tiechef_api.models import Staff
from tiechef_api.repositories import StaffRepository
from tiechef_api.schemas import StaffDTO
from tiechef_api.seed import staff_records
from tiechef_api.services.base_service import BaseCRUDService
from tiechef_api.validators import STAFF_RULES

logger = get_logger(__name__)

DUPLICATE_EMAIL_MESSAGE = "Staff with this email already exists"


class StaffService(BaseCRUDService[Staff, StaffDTO]):
    """
    Service for staff members.

    Business rules:
    - Email is unique across staff (checked on create and update)
    - Field rules from STAFF_RULES run before the uniqueness check
    """

    def __init__(self, db: Session):
        super().__init__(
            repo=StaffRepository(db),
            model=Staff,
            dto_schema=StaffDTO,
            entity_name="Staff",
            id_field="staff_id",
            rules=STAFF_RULES,
        )

    def list_by_type(self, staff_type: StaffType) -> list[StaffDTO]:
        return self._to_outputs(self._repo.find_by_type(staff_type))

    def list_by_role(self, role: StaffRole) -> list[StaffDTO]:
        return self._to_outputs(self._repo.find_by_role(role))

    def delete_with_message(self, staff_id: int) -> str:
        entity_info = self.delete(staff_id)
        return f"Staff {entity_info['full_name']} deleted successfully"

    def _validate_create(self, dto: StaffDTO) -> None:
        if self._repo.email_taken(dto.email):
            raise DuplicateEntityError(DUPLICATE_EMAIL_MESSAGE, email=mask_email(dto.email))

    def _validate_update(self, entity: Staff, dto: StaffDTO) -> None:
        if self._repo.email_taken(dto.email, exclude_id=entity.staff_id):
            raise DuplicateEntityError(
                DUPLICATE_EMAIL_MESSAGE,
                staff_id=entity.staff_id,
                email=mask_email(dto.email),
            )

    def _seed_records(self) -> list[Staff]:
        return staff_records()
