from app.services.rating import RatingThresholds, compute_restaurant_thumb
from app.services.restaurant_service import RestaurantService
from app.services.search_service import SearchService
from app.services.visit_service import VisitService

__all__ = [
    "RatingThresholds",
    "compute_restaurant_thumb",
    "RestaurantService",
    "SearchService",
    "VisitService",
]
