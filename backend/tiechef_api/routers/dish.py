"""
Dish endpoints.

The list endpoint is served through the Redis dish listing cache; every
write invalidates it.
"""

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from shared.infrastructure.cache import CachedListing
from shared.infrastructure.db import get_db
from tiechef_api.schemas import DishDTO, SeedResult
from tiechef_api.services.domain import DishService, get_dish_cache


router = APIRouter(prefix="/api/dish", tags=["dish"])


def _get_service(
    db: Session = Depends(get_db),
    cache: CachedListing = Depends(get_dish_cache),
) -> DishService:
    """Get DishService instance bound to the request session and the listing cache."""
    return DishService(db, cache)


@router.get("", response_model=list[DishDTO])
def list_dishes(service: DishService = Depends(_get_service)) -> list[DishDTO]:
    return service.list_all()


@router.post("/init-test-data", response_model=SeedResult)
def init_dish_test_data(service: DishService = Depends(_get_service)) -> SeedResult:
    return service.seed()


@router.get("/{dish_id}", response_model=DishDTO)
def get_dish(dish_id: int, service: DishService = Depends(_get_service)) -> DishDTO:
    return service.get_by_id(dish_id)


@router.post("", response_model=DishDTO, status_code=status.HTTP_201_CREATED)
def create_dish(
    body: DishDTO,
    request: Request,
    response: Response,
    service: DishService = Depends(_get_service),
) -> DishDTO:
    created = service.create(body)
    response.headers["Location"] = str(request.url_for("get_dish", dish_id=created.dish_id))
    return created


@router.put("/{dish_id}", response_model=DishDTO)
def update_dish(
    dish_id: int,
    body: DishDTO,
    service: DishService = Depends(_get_service),
) -> DishDTO:
    return service.update(dish_id, body)


@router.delete("/{dish_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_dish(dish_id: int, service: DishService = Depends(_get_service)) -> None:
    service.delete(dish_id)
