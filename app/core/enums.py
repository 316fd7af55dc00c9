from enum import Enum


class Thumb(str, Enum):
    DOWN = "down"
    NEUTRAL = "neutral"
    UP = "up"


class RestaurantStatus(str, Enum):
    WISHLIST = "wishlist"
    ACTIVE = "active"
    ARCHIVED = "archived"


class ServiceType(str, Enum):
    EAT_IN = "eat_in"
    TAKEAWAY = "takeaway"
    DELIVERY = "delivery"


class VisitedSort(str, Enum):
    NAME = "name"
    MOST_VISITED = "most_visited"
    RATING = "rating"
    RECENTLY_VISITED = "recently_visited"


class IdPrefix(str, Enum):
    RESTAURANT = "rest"
    VISIT = "visit"
    ITEM = "item"
    PHOTO = "photo"
