from typing import Annotated, Optional

from fastapi import APIRouter, Query

from app.api.dependencies import SearchServiceDep
from app.core.enums import RestaurantStatus, ServiceType, Thumb
from app.schemas.entities import DATE_PATTERN
from app.schemas.restaurants import RestaurantOverview
from app.schemas.search import (
    ItemSearchFilters,
    RestaurantSearchFilters,
    SearchItemResult,
)

router = APIRouter()


@router.get("/restaurants", response_model=list[RestaurantOverview])
async def search_restaurants(
    service: SearchServiceDep,
    q: str = "",
    cuisines: Annotated[Optional[list[str]], Query()] = None,
    status: Optional[RestaurantStatus] = None,
    thumbs: Annotated[Optional[list[Thumb]], Query()] = None,
) -> list[RestaurantOverview]:
    filters = RestaurantSearchFilters(cuisines=cuisines, status=status, thumbs=thumbs)
    return await service.search_restaurants(q, filters)


@router.get("/items", response_model=list[SearchItemResult])
async def search_items(
    service: SearchServiceDep,
    q: str = "",
    thumbs: Annotated[Optional[list[Thumb]], Query()] = None,
    cuisines: Annotated[Optional[list[str]], Query()] = None,
    service_types: Annotated[Optional[list[ServiceType]], Query()] = None,
    from_date: Annotated[Optional[str], Query(pattern=DATE_PATTERN)] = None,
    to_date: Annotated[Optional[str], Query(pattern=DATE_PATTERN)] = None,
) -> list[SearchItemResult]:
    filters = ItemSearchFilters(
        thumbs=thumbs,
        cuisines=cuisines,
        service_types=service_types,
        from_date=from_date,
        to_date=to_date,
    )
    return await service.search_items(q, filters)
