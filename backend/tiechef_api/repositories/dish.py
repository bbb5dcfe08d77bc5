"""
Dish Repository - Data access for menu items.
"""

from sqlalchemy.orm import Session

from tiechef_api.models import Dish
from .base import Repository


class DishRepository(Repository[Dish]):
    """Repository for Dish entities. Listing is cached one layer up."""

    def __init__(self, session: Session):
        super().__init__(Dish, session)


def get_dish_repository(db: Session) -> DishRepository:
    return DishRepository(db)
