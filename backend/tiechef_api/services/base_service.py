"""
Base Service Classes.

Router (thin) -> Service (validation, orchestration) -> Repository (unit of work) -> Model

BaseCRUDService implements the write pipeline every resource shares:

    create:  rules -> _validate_create -> add -> commit -> _after_create
    update:  id match -> load (404) -> rules -> _validate_update -> apply -> commit -> _after_update
    delete:  load (404) -> _validate_delete -> delete -> commit -> _after_delete

Declarative field rules always run first; cross-record checks (uniqueness
against the live store) belong in the _validate_* hooks so both kinds of
rejection happen before anything is staged.

Usage:
    class DishService(BaseCRUDService[Dish, DishDTO]):
        def __init__(self, db: Session):
            super().__init__(
                repo=DishRepository(db),
                model=Dish,
                dto_schema=DishDTO,
                entity_name="Dish",
                id_field="dish_id",
                rules=DISH_RULES,
            )
"""

from __future__ import annotations

from typing import Any, Generic, Sequence, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from shared.config.logging import get_logger
from shared.utils.exceptions import DatabaseError, IdMismatchError, NotFoundError
from shared.utils.validators import RuleSet
from tiechef_api.schemas import SeedResult

logger = get_logger(__name__)

ModelT = TypeVar("ModelT")
DtoT = TypeVar("DtoT", bound=BaseModel)


class BaseCRUDService(Generic[ModelT, DtoT]):
    """
    Base service for entities with CRUD operations.

    Works over any repository honoring the repository contract (SQL or
    in-memory). Subclasses override hooks for business rules and side
    effects.
    """

    def __init__(
        self,
        *,
        repo: Any,
        model: type[ModelT],
        dto_schema: type[DtoT],
        entity_name: str,
        id_field: str,
        rules: RuleSet | None = None,
    ):
        self._repo = repo
        self._model = model
        self._dto_schema = dto_schema
        self._entity_name = entity_name
        self._id_field = id_field
        self._rules = rules or RuleSet()

    @property
    def repo(self) -> Any:
        """Repository for data access."""
        return self._repo

    @property
    def entity_name(self) -> str:
        """Human-readable entity name for messages."""
        return self._entity_name

    # =========================================================================
    # Read Operations
    # =========================================================================

    def list_all(self) -> list[DtoT]:
        return self._to_outputs(self._repo.get_all())

    def get_by_id(self, entity_id: int) -> DtoT:
        """
        Raises:
            NotFoundError: If entity not found.
        """
        return self.to_output(self.get_entity(entity_id))

    def get_entity(self, entity_id: int) -> ModelT:
        """Load the raw entity or raise NotFoundError."""
        entity = self._repo.get_by_id(entity_id)
        if entity is None:
            raise NotFoundError(self._entity_name, entity_id)
        return entity

    # =========================================================================
    # Write Operations
    # =========================================================================

    def create(self, dto: DtoT) -> DtoT:
        """
        Validate and persist a new entity. The store assigns its id.

        Raises:
            RequestValidationFailed: If field rules fail.
            DuplicateEntityError: If a uniqueness check fails.
            DatabaseError: If the commit fails.
        """
        self._rules.check(dto, entity=self._entity_name)
        self._validate_create(dto)

        entity = self._build_entity(dto)
        self._repo.add(entity)
        self._commit("create")

        logger.info(f"{self._entity_name} created", entity_id=self._identity(entity))
        self._after_create(entity)
        return self.to_output(entity)

    def update(self, entity_id: int, dto: DtoT) -> DtoT:
        """
        Replace every field of an existing entity.

        A body id that is set and differs from the route id is rejected;
        an omitted body id is taken from the route.

        Raises:
            IdMismatchError: If route and body ids disagree.
            NotFoundError: If entity not found.
            RequestValidationFailed: If field rules fail.
            DatabaseError: If the commit fails.
        """
        body_id = getattr(dto, self._id_field)
        if body_id and body_id != entity_id:
            raise IdMismatchError(entity_id, body_id, entity=self._entity_name)
        dto = dto.model_copy(update={self._id_field: entity_id})

        entity = self.get_entity(entity_id)

        self._rules.check(dto, entity=self._entity_name, entity_id=entity_id)
        self._validate_update(entity, dto)

        self._apply(entity, dto)
        entity = self._repo.update(entity)
        self._commit("update", entity_id=entity_id)

        logger.info(f"{self._entity_name} updated", entity_id=entity_id)
        self._after_update(entity)
        return self.to_output(entity)

    def delete(self, entity_id: int) -> dict[str, Any]:
        """
        Physically delete an entity.

        Returns:
            Snapshot of the deleted entity's fields.

        Raises:
            NotFoundError: If entity not found.
        """
        entity = self.get_entity(entity_id)
        self._validate_delete(entity)

        entity_info = self._get_entity_info(entity)
        self._repo.delete(entity)
        self._commit("delete", entity_id=entity_id)

        logger.info(f"{self._entity_name} deleted", entity_id=entity_id)
        self._after_delete(entity_info)
        return entity_info

    def seed(self) -> SeedResult:
        """
        Insert the sample data set unless the store already has rows.
        Seed records are trusted and skip validation.
        """
        if self._repo.exists():
            return SeedResult(message="Test data already exists", created=0)

        records = self._seed_records()
        self._repo.add_range(records)
        self._commit("seed")

        logger.info(f"{self._entity_name} test data created", count=len(records))
        self._after_seed(records)
        return SeedResult(
            message=f"Created {len(records)} test {self._entity_name.lower()} records",
            created=len(records),
        )

    # =========================================================================
    # Transformation
    # =========================================================================

    def to_output(self, entity: ModelT) -> DtoT:
        """Convert entity to output DTO. Override for custom transformation."""
        return self._dto_schema.model_validate(entity)

    def _to_outputs(self, entities: Sequence[ModelT]) -> list[DtoT]:
        return [self.to_output(e) for e in entities]

    def _build_entity(self, dto: DtoT) -> ModelT:
        return self._model(**dto.model_dump(exclude={self._id_field}))

    def _apply(self, entity: ModelT, dto: DtoT) -> None:
        for field_name, value in dto.model_dump(exclude={self._id_field}).items():
            setattr(entity, field_name, value)

    def _identity(self, entity: ModelT) -> Any:
        return getattr(entity, self._id_field)

    def _get_entity_info(self, entity: ModelT) -> dict[str, Any]:
        """Field snapshot taken before deletion (the entity is unusable after commit)."""
        return self.to_output(entity).model_dump()

    def _commit(self, operation: str, **log_context: Any) -> None:
        try:
            self._repo.commit()
        except SQLAlchemyError as e:
            logger.error(
                f"Failed to {operation} {self._entity_name}",
                error=str(e),
                **log_context,
            )
            raise DatabaseError(f"{operation} {self._entity_name.lower()}") from e

    # =========================================================================
    # Validation Hooks (override in subclasses)
    # =========================================================================

    def _validate_create(self, dto: DtoT) -> None:
        """Cross-record checks before create."""

    def _validate_update(self, entity: ModelT, dto: DtoT) -> None:
        """Cross-record checks before update."""

    def _validate_delete(self, entity: ModelT) -> None:
        """Checks before delete."""

    # =========================================================================
    # Lifecycle Hooks (override in subclasses)
    # =========================================================================

    def _after_create(self, entity: ModelT) -> None:
        """Hook called after the create commit."""

    def _after_update(self, entity: ModelT) -> None:
        """Hook called after the update commit."""

    def _after_delete(self, entity_info: dict[str, Any]) -> None:
        """Hook called after the delete commit."""

    def _after_seed(self, records: Sequence[ModelT]) -> None:
        """Hook called after test data is committed."""

    def _seed_records(self) -> list[ModelT]:
        """Sample records for init-test-data."""
        return []
