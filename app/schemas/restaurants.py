from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.core.enums import RestaurantStatus, ServiceType, Thumb
from app.schemas.entities import (
    DATE_PATTERN,
    Restaurant,
    Visit,
    VisitItem,
    VisitPhoto,
    normalize_cuisines,
)


class RestaurantCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255)
    status: RestaurantStatus = RestaurantStatus.WISHLIST
    cuisines: list[str] = Field(default_factory=list)
    notes: Optional[str] = None


class RestaurantPatch(BaseModel):
    """Partial update. Only fields explicitly set are merged; notes may be cleared with null."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    status: Optional[RestaurantStatus] = None
    cuisines: Optional[list[str]] = None
    notes: Optional[str] = None

    def apply(self, restaurant: Restaurant, updated_at: datetime) -> Restaurant:
        changes: dict = {"updated_at": updated_at}
        if self.name is not None:
            changes["name"] = self.name
        if self.status is not None:
            changes["status"] = self.status
        if self.cuisines is not None:
            changes["cuisines"] = normalize_cuisines(self.cuisines)
        if "notes" in self.model_fields_set:
            changes["notes"] = self.notes
        return restaurant.model_copy(update=changes)


class RestaurantStatusUpdate(BaseModel):
    status: RestaurantStatus


class RestaurantListFilters(BaseModel):
    status: Optional[RestaurantStatus] = None
    search: Optional[str] = None
    cuisines: Optional[list[str]] = None


class VisitedFilters(BaseModel):
    search: Optional[str] = None
    cuisines: Optional[list[str]] = None
    thumbs: Optional[list[Thumb]] = None
    service_types: Optional[list[ServiceType]] = None
    from_date: Optional[str] = Field(default=None, pattern=DATE_PATTERN)
    to_date: Optional[str] = Field(default=None, pattern=DATE_PATTERN)


class ThumbsBreakdown(BaseModel):
    up: int = 0
    neutral: int = 0
    down: int = 0


class RestaurantSummary(BaseModel):
    computed_thumb: Thumb
    visit_count: int
    last_visited: Optional[str] = None
    thumbs_breakdown: ThumbsBreakdown


class RestaurantOverview(Restaurant):
    """Restaurant enriched with the summary computed from its visits."""

    computed_thumb: Thumb
    visit_count: int
    last_visited: Optional[str] = None
    thumbs_breakdown: ThumbsBreakdown

    @classmethod
    def build(
        cls, restaurant: Restaurant, summary: RestaurantSummary
    ) -> "RestaurantOverview":
        return cls(**dict(restaurant), **dict(summary))


class VisitDetails(BaseModel):
    visit: Visit
    items: list[VisitItem] = Field(default_factory=list)
    photos: list[VisitPhoto] = Field(default_factory=list)


class RestaurantDetails(BaseModel):
    restaurant: Restaurant
    summary: RestaurantSummary
    visits: list[VisitDetails] = Field(default_factory=list)
