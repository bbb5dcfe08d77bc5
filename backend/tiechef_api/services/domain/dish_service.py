"""
Dish Service - menu management with a cached listing.

The full menu is read through a Redis-backed CachedListing. Every committed
create, update, delete or seed drops the cached listing so the next read
reloads it from the database.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from shared.config.settings import settings
from shared.config.logging import get_logger
from shared.infrastructure.cache import CachedListing
from shared.infrastructure.redis import CACHE_KEY_DISH_LIST, get_redis_sync_client
from tiechef_api.models import Dish
from tiechef_api.repositories import DishRepository
from tiechef_api.schemas import DishDTO
from tiechef_api.seed import dish_records
from tiechef_api.services.base_service import BaseCRUDService
from tiechef_api.validators import DISH_RULES

logger = get_logger(__name__)


def get_dish_cache() -> CachedListing:
    """FastAPI dependency: the dish listing cache over the shared Redis pool."""
    return CachedListing(
        get_redis_sync_client(),
        CACHE_KEY_DISH_LIST,
        settings.dish_cache_ttl_seconds,
        enabled=settings.dish_cache_enabled,
    )


class DishService(BaseCRUDService[Dish, DishDTO]):
    """Service for menu items."""

    def __init__(self, db: Session, cache: CachedListing):
        super().__init__(
            repo=DishRepository(db),
            model=Dish,
            dto_schema=DishDTO,
            entity_name="Dish",
            id_field="dish_id",
            rules=DISH_RULES,
        )
        self._cache = cache

    def list_all(self) -> list[DishDTO]:
        rows = self._cache.get_or_load(
            lambda: [dto.model_dump() for dto in self._to_outputs(self._repo.get_all())]
        )
        return [DishDTO.model_validate(row) for row in rows]

    def _after_create(self, entity: Dish) -> None:
        self._cache.invalidate()

    def _after_update(self, entity: Dish) -> None:
        self._cache.invalidate()

    def _after_delete(self, entity_info: dict) -> None:
        self._cache.invalidate()

    def _after_seed(self, records) -> None:
        self._cache.invalidate()

    def _seed_records(self) -> list[Dish]:
        return dish_records()
