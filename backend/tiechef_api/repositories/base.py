"""
Generic repository over one SQLAlchemy model.

The repository wraps the request's Session, which is the unit of work:
add/update/delete only stage changes and commit() applies all of them at
once. Nothing is durable until commit() returns.

Usage:
    repo = Repository(Dish, db)

    dish = repo.add(Dish(name="Borscht", price=Decimal("7.50")))
    repo.commit()                       # dish.dish_id assigned here

    repo.find(Dish.price > 10)
    repo.exists(Dish.name == "Borscht")
"""

from __future__ import annotations

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.orm import Session
from sqlalchemy.sql import Select

from tiechef_api.models import Base
from shared.infrastructure.db import safe_commit

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """
    CRUD and criteria queries for one model.

    Criteria passed to find()/exists() are SQLAlchemy column expressions,
    so every filter compiles to a single SQL query. Entity-specific
    repositories wrap them in named filters.
    """

    def __init__(self, model: type[ModelT], session: Session):
        self._model = model
        self._session = session

    @property
    def model(self) -> type[ModelT]:
        """The SQLAlchemy model class."""
        return self._model

    @property
    def session(self) -> Session:
        """The database session (unit of work)."""
        return self._session

    @property
    def _pk(self) -> Any:
        return self._model.__mapper__.primary_key[0]

    def _base_query(self) -> Select:
        return select(self._model)

    # =========================================================================
    # Reads
    # =========================================================================

    def get_all(self, *, order_by: Any | None = None) -> Sequence[ModelT]:
        """Every stored row, ordered by primary key unless told otherwise."""
        query = self._base_query().order_by(order_by if order_by is not None else self._pk)
        return self._session.scalars(query).all()

    def get_by_id(self, entity_id: int) -> ModelT | None:
        """Point lookup. Absent is not an error."""
        return self._session.get(self._model, entity_id)

    def find(self, *criteria: ColumnElement[bool], order_by: Any | None = None) -> Sequence[ModelT]:
        """All rows matching every criterion."""
        query = self._base_query().where(*criteria)
        query = query.order_by(order_by if order_by is not None else self._pk)
        return self._session.scalars(query).all()

    def exists(self, *criteria: ColumnElement[bool]) -> bool:
        """True if any row matches every criterion (any row at all without criteria)."""
        query = self._base_query().where(*criteria)
        return bool(self._session.scalar(select(query.exists())))

    def count(self) -> int:
        return self._session.scalar(select(func.count()).select_from(self._model)) or 0

    # =========================================================================
    # Staged writes
    # =========================================================================

    def add(self, entity: ModelT) -> ModelT:
        """Stage an insert. The primary key is assigned on commit."""
        self._session.add(entity)
        return entity

    def add_range(self, entities: Sequence[ModelT]) -> Sequence[ModelT]:
        """Stage several inserts that land in the same commit."""
        self._session.add_all(entities)
        return entities

    def update(self, entity: ModelT) -> ModelT:
        """
        Stage a full replacement of the row with the entity's primary key.
        Returns the session-bound instance.
        """
        return self._session.merge(entity)

    def delete(self, entity: ModelT) -> None:
        """Stage removal of a loaded entity."""
        self._session.delete(entity)

    def delete_by_id(self, entity_id: int) -> bool:
        """Stage removal by id. Returns False (and stages nothing) when absent."""
        entity = self.get_by_id(entity_id)
        if entity is None:
            return False
        self._session.delete(entity)
        return True

    def commit(self) -> None:
        """Apply every staged change. Rolls back and re-raises on failure."""
        safe_commit(self._session)

    def refresh(self, entity: ModelT) -> ModelT:
        """Reload entity state from the database."""
        self._session.refresh(entity)
        return entity
