import logging
from typing import Optional

from app.core.enums import IdPrefix
from app.db.cascade import CascadePlan
from app.db.repositories.base import SnapshotRepository
from app.exceptions import RestaurantNotFoundException
from app.schemas.entities import Restaurant
from app.schemas.restaurants import (
    RestaurantCreate,
    RestaurantListFilters,
    RestaurantPatch,
)

logger = logging.getLogger(__name__)


def _matches(restaurant: Restaurant, filters: RestaurantListFilters) -> bool:
    if filters.status and restaurant.status != filters.status:
        return False

    needle = (filters.search or "").strip().lower()
    if needle and needle not in restaurant.name.lower():
        return False

    if filters.cuisines:
        tags = {cuisine.lower() for cuisine in restaurant.cuisines}
        if not any(cuisine.strip().lower() in tags for cuisine in filters.cuisines):
            return False

    return True


class RestaurantRepository(SnapshotRepository):

    async def list(
        self, filters: Optional[RestaurantListFilters] = None
    ) -> list[Restaurant]:
        filters = filters or RestaurantListFilters()
        snapshot = await self.store.load()
        return [r for r in snapshot.restaurants if _matches(r, filters)]

    async def get(self, restaurant_id: str) -> Optional[Restaurant]:
        snapshot = await self.store.load()
        return next((r for r in snapshot.restaurants if r.id == restaurant_id), None)

    async def find_by_name(self, name: str) -> Optional[Restaurant]:
        target = name.strip().lower()
        snapshot = await self.store.load()
        return next(
            (r for r in snapshot.restaurants if r.name.strip().lower() == target),
            None,
        )

    async def create(self, data: RestaurantCreate) -> Restaurant:
        snapshot = await self.store.load()
        created_at = self.now()
        restaurant = Restaurant(
            id=self.store.create_id(IdPrefix.RESTAURANT),
            name=data.name,
            status=data.status,
            cuisines=data.cuisines,
            notes=data.notes,
            created_at=created_at,
            updated_at=created_at,
        )
        snapshot.restaurants.insert(0, restaurant)
        await self.store.save(snapshot)

        logger.info(
            "Created restaurant restaurant_id=%s status=%s",
            restaurant.id,
            restaurant.status.value,
            extra={"restaurant_id": restaurant.id},
        )
        return restaurant

    async def update(self, restaurant_id: str, patch: RestaurantPatch) -> Restaurant:
        snapshot = await self.store.load()
        for idx, current in enumerate(snapshot.restaurants):
            if current.id == restaurant_id:
                updated = patch.apply(current, updated_at=self.now())
                snapshot.restaurants[idx] = updated
                await self.store.save(snapshot)
                return updated
        raise RestaurantNotFoundException(restaurant_id)

    async def delete(self, restaurant_id: str) -> None:
        """Delete a restaurant with all its visits, items and photos. Unknown ids are a no-op."""
        snapshot = await self.store.load()
        plan = CascadePlan.collect(snapshot, restaurant_ids=[restaurant_id])
        await self._delete_cascade(snapshot, plan)
