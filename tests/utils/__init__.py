from tests.utils.factories import RestaurantFactory, VisitFactory
from tests.utils.helpers import create_visited_restaurant, make_visit

__all__ = [
    "RestaurantFactory",
    "VisitFactory",
    "create_visited_restaurant",
    "make_visit",
]
