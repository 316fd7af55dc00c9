from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.enums import RestaurantStatus, ServiceType, Thumb

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


def normalize_cuisines(cuisines: list[str]) -> list[str]:
    """Strip tags, drop blanks and case-insensitive duplicates, keep first spelling."""
    seen: set[str] = set()
    normalized: list[str] = []
    for cuisine in cuisines:
        tag = cuisine.strip()
        if not tag or tag.lower() in seen:
            continue
        seen.add(tag.lower())
        normalized.append(tag)
    return normalized


class Restaurant(BaseModel):
    """Restaurant entity. ID starts with 'rest_'."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    status: RestaurantStatus = RestaurantStatus.WISHLIST
    cuisines: list[str] = Field(default_factory=list)
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @field_validator("cuisines")
    @classmethod
    def _normalize_cuisines(cls, value: list[str]) -> list[str]:
        return normalize_cuisines(value)


class Visit(BaseModel):
    """A single visit to a restaurant. visit_date is a YYYY-MM-DD string."""

    model_config = ConfigDict(frozen=True)

    id: str
    restaurant_id: str
    visit_date: str
    service_type: ServiceType
    overall_thumb: Thumb
    notes: Optional[str] = None
    created_at: datetime


class VisitItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    visit_id: str
    name: str
    thumb: Thumb = Thumb.NEUTRAL
    notes: Optional[str] = None
    created_at: datetime


class VisitPhoto(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    visit_id: str
    storage_path: str
    caption: Optional[str] = None
    created_at: datetime


class Snapshot(BaseModel):
    """Full persisted state: the four entity collections, loaded and saved whole."""

    model_config = ConfigDict(populate_by_name=True)

    restaurants: list[Restaurant] = Field(default_factory=list)
    visits: list[Visit] = Field(default_factory=list)
    visit_items: list[VisitItem] = Field(default_factory=list, alias="visitItems")
    visit_photos: list[VisitPhoto] = Field(default_factory=list, alias="visitPhotos")
