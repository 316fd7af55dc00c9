from typing import Annotated, Optional

from fastapi import APIRouter, Query, Response, status

from app.api.dependencies import RestaurantServiceDep, VisitServiceDep
from app.core.enums import ServiceType, Thumb, VisitedSort
from app.schemas.entities import DATE_PATTERN, Restaurant, Visit
from app.schemas.restaurants import (
    RestaurantCreate,
    RestaurantDetails,
    RestaurantListFilters,
    RestaurantOverview,
    RestaurantPatch,
    RestaurantStatusUpdate,
    VisitedFilters,
)

router = APIRouter()


@router.get("/wishlist", response_model=list[Restaurant])
async def list_wishlist(
    service: RestaurantServiceDep,
    search: Optional[str] = None,
    cuisines: Annotated[Optional[list[str]], Query()] = None,
) -> list[Restaurant]:
    return await service.list_wishlist(
        RestaurantListFilters(search=search, cuisines=cuisines)
    )


@router.get("/visited", response_model=list[RestaurantOverview])
async def list_visited(
    service: RestaurantServiceDep,
    search: Optional[str] = None,
    cuisines: Annotated[Optional[list[str]], Query()] = None,
    thumbs: Annotated[Optional[list[Thumb]], Query()] = None,
    service_types: Annotated[Optional[list[ServiceType]], Query()] = None,
    from_date: Annotated[Optional[str], Query(pattern=DATE_PATTERN)] = None,
    to_date: Annotated[Optional[str], Query(pattern=DATE_PATTERN)] = None,
    sort_by: VisitedSort = VisitedSort.RECENTLY_VISITED,
) -> list[RestaurantOverview]:
    filters = VisitedFilters(
        search=search,
        cuisines=cuisines,
        thumbs=thumbs,
        service_types=service_types,
        from_date=from_date,
        to_date=to_date,
    )
    return await service.list_visited(filters, sort_by)


@router.post("", response_model=Restaurant, status_code=status.HTTP_201_CREATED)
async def add_restaurant(
    data: RestaurantCreate, service: RestaurantServiceDep
) -> Restaurant:
    return await service.add_restaurant(data)


@router.get("/{restaurant_id}", response_model=RestaurantDetails)
async def get_restaurant_details(
    restaurant_id: str, service: RestaurantServiceDep
) -> RestaurantDetails:
    return await service.get_restaurant_details(restaurant_id)


@router.patch("/{restaurant_id}", response_model=Restaurant)
async def update_restaurant(
    restaurant_id: str, patch: RestaurantPatch, service: RestaurantServiceDep
) -> Restaurant:
    return await service.update_restaurant(restaurant_id, patch)


@router.put("/{restaurant_id}/status", response_model=Restaurant)
async def set_restaurant_status(
    restaurant_id: str, body: RestaurantStatusUpdate, service: RestaurantServiceDep
) -> Restaurant:
    return await service.set_restaurant_status(restaurant_id, body.status)


@router.delete("/{restaurant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_restaurant(
    restaurant_id: str, service: RestaurantServiceDep
) -> Response:
    await service.delete_restaurant(restaurant_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{restaurant_id}/visits", response_model=list[Visit])
async def list_restaurant_visits(
    restaurant_id: str, service: VisitServiceDep
) -> list[Visit]:
    return await service.list_by_restaurant(restaurant_id)
