from app.db.repositories.restaurant_repository import RestaurantRepository
from app.db.repositories.visit_item_repository import VisitItemRepository
from app.db.repositories.visit_photo_repository import VisitPhotoRepository
from app.db.repositories.visit_repository import VisitRepository
from app.db.store import SnapshotStore


class Repositories:
    """Every repository over one store. Built once at startup and passed to services."""

    def __init__(self, store: SnapshotStore) -> None:
        self.store = store
        self.restaurants = RestaurantRepository(store)
        self.visits = VisitRepository(store)
        self.visit_items = VisitItemRepository(store)
        self.visit_photos = VisitPhotoRepository(store)


__all__ = [
    "Repositories",
    "RestaurantRepository",
    "VisitItemRepository",
    "VisitPhotoRepository",
    "VisitRepository",
]
