from typing import Optional

from pydantic import BaseModel, Field

from app.core.enums import RestaurantStatus, ServiceType, Thumb
from app.schemas.entities import DATE_PATTERN, Restaurant, Visit, VisitItem


class RestaurantSearchFilters(BaseModel):
    cuisines: Optional[list[str]] = None
    status: Optional[RestaurantStatus] = None
    thumbs: Optional[list[Thumb]] = None


class ItemSearchFilters(BaseModel):
    thumbs: Optional[list[Thumb]] = None
    cuisines: Optional[list[str]] = None
    service_types: Optional[list[ServiceType]] = None
    from_date: Optional[str] = Field(default=None, pattern=DATE_PATTERN)
    to_date: Optional[str] = Field(default=None, pattern=DATE_PATTERN)


class SearchItemResult(BaseModel):
    item: VisitItem
    visit: Visit
    restaurant: Restaurant
