from app.schemas.common import ErrorDetail, ErrorResponse
from app.schemas.entities import Restaurant, Snapshot, Visit, VisitItem, VisitPhoto
from app.schemas.restaurants import (
    RestaurantCreate,
    RestaurantDetails,
    RestaurantListFilters,
    RestaurantOverview,
    RestaurantPatch,
    RestaurantStatusUpdate,
    RestaurantSummary,
    ThumbsBreakdown,
    VisitDetails,
    VisitedFilters,
)
from app.schemas.search import ItemSearchFilters, RestaurantSearchFilters, SearchItemResult
from app.schemas.visits import (
    AddVisitInput,
    DraftItem,
    DraftPhoto,
    NewVisitItem,
    NewVisitPhoto,
    VisitCreate,
    VisitItemCreate,
    VisitItemPatch,
    VisitPatch,
    VisitPhotoPatch,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "Restaurant",
    "Snapshot",
    "Visit",
    "VisitItem",
    "VisitPhoto",
    "RestaurantCreate",
    "RestaurantDetails",
    "RestaurantListFilters",
    "RestaurantOverview",
    "RestaurantPatch",
    "RestaurantStatusUpdate",
    "RestaurantSummary",
    "ThumbsBreakdown",
    "VisitDetails",
    "VisitedFilters",
    "ItemSearchFilters",
    "RestaurantSearchFilters",
    "SearchItemResult",
    "AddVisitInput",
    "DraftItem",
    "DraftPhoto",
    "NewVisitItem",
    "NewVisitPhoto",
    "VisitCreate",
    "VisitItemCreate",
    "VisitItemPatch",
    "VisitPatch",
    "VisitPhotoPatch",
]
