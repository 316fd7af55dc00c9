import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.enums import ServiceType, Thumb
from app.schemas.entities import DATE_PATTERN, Visit, VisitItem, VisitPhoto

_DATE_RE = re.compile(DATE_PATTERN)


class VisitCreate(BaseModel):
    restaurant_id: str = Field(..., min_length=1)
    visit_date: str = Field(..., pattern=DATE_PATTERN)
    service_type: ServiceType
    overall_thumb: Thumb
    notes: Optional[str] = None


class VisitPatch(BaseModel):
    """Partial visit update. The parent restaurant can never change."""

    visit_date: Optional[str] = Field(default=None, pattern=DATE_PATTERN)
    service_type: Optional[ServiceType] = None
    overall_thumb: Optional[Thumb] = None
    notes: Optional[str] = None

    def apply(self, visit: Visit) -> Visit:
        changes: dict = {}
        if self.visit_date is not None:
            changes["visit_date"] = self.visit_date
        if self.service_type is not None:
            changes["service_type"] = self.service_type
        if self.overall_thumb is not None:
            changes["overall_thumb"] = self.overall_thumb
        if "notes" in self.model_fields_set:
            changes["notes"] = self.notes
        return visit.model_copy(update=changes)


class VisitItemCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    visit_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    thumb: Thumb = Thumb.NEUTRAL
    notes: Optional[str] = None


class VisitItemPatch(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(default=None, min_length=1)
    thumb: Optional[Thumb] = None
    notes: Optional[str] = None

    def apply(self, item: VisitItem) -> VisitItem:
        changes: dict = {}
        if self.name is not None:
            changes["name"] = self.name
        if self.thumb is not None:
            changes["thumb"] = self.thumb
        if "notes" in self.model_fields_set:
            changes["notes"] = self.notes
        return item.model_copy(update=changes)


class VisitPhotoPatch(BaseModel):
    caption: Optional[str] = None

    def apply(self, photo: VisitPhoto) -> VisitPhoto:
        if "caption" not in self.model_fields_set:
            return photo
        return photo.model_copy(update={"caption": self.caption})


class DraftItem(BaseModel):
    """Item typed while logging a visit. Blank names are skipped on save."""

    name: str = ""
    thumb: Thumb = Thumb.NEUTRAL
    notes: Optional[str] = None


class DraftPhoto(BaseModel):
    """Photo reference attached while logging a visit. Blank paths are skipped on save."""

    storage_path: str = ""
    caption: Optional[str] = None


class NewVisitItem(DraftItem):
    """Item added to an existing visit. The name is required."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1)


class NewVisitPhoto(DraftPhoto):
    model_config = ConfigDict(str_strip_whitespace=True)

    storage_path: str = Field(..., min_length=1)


class AddVisitInput(BaseModel):
    """
    Input for logging a visit with nested items and photos.

    visit_date, service_type and overall_thumb are optional here so that the
    visit service reports every missing field at once.
    """

    restaurant_id: str = Field(..., min_length=1)
    visit_date: Optional[str] = None
    service_type: Optional[ServiceType] = None
    overall_thumb: Optional[Thumb] = None
    notes: Optional[str] = None
    items: list[DraftItem] = Field(default_factory=list)
    photos: list[DraftPhoto] = Field(default_factory=list)

    @field_validator("visit_date")
    @classmethod
    def _check_date_format(cls, value: Optional[str]) -> Optional[str]:
        if value and value.strip() and not _DATE_RE.match(value.strip()):
            raise ValueError("visit_date must be formatted as YYYY-MM-DD")
        return value.strip() if value else value
