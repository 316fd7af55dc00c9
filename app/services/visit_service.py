import logging
from typing import Optional

from app.core.enums import RestaurantStatus
from app.db.repositories import Repositories
from app.exceptions import MissingVisitFieldsException
from app.metrics import restaurants_promoted_total, visits_created_total
from app.schemas.entities import Visit, VisitItem, VisitPhoto
from app.schemas.restaurants import RestaurantPatch
from app.schemas.visits import (
    AddVisitInput,
    DraftItem,
    VisitCreate,
    VisitItemCreate,
    VisitItemPatch,
    VisitPatch,
    VisitPhotoPatch,
)

logger = logging.getLogger(__name__)


class VisitService:
    def __init__(self, repos: Repositories) -> None:
        self.repos = repos

    async def add_visit(self, data: AddVisitInput) -> Visit:
        """Log a visit with its items and photos, promoting a wishlist restaurant.

        Steps after the visit is written are not atomic. If creating an item,
        a photo or the status promotion fails, the error propagates and the
        visit plus whatever was already written stays in place.

        Raises:
            MissingVisitFieldsException: visit_date, service_type or
                overall_thumb missing. Nothing is written.
            RestaurantNotFoundException: restaurant_id is unknown.
        """
        missing = [
            name
            for name, value in (
                ("visit_date", data.visit_date),
                ("service_type", data.service_type),
                ("overall_thumb", data.overall_thumb),
            )
            if not value
        ]
        if missing:
            raise MissingVisitFieldsException(missing)

        visit = await self.repos.visits.create(
            VisitCreate(
                restaurant_id=data.restaurant_id,
                visit_date=data.visit_date,
                service_type=data.service_type,
                overall_thumb=data.overall_thumb,
                notes=data.notes,
            )
        )
        visits_created_total.labels(service_type=visit.service_type.value).inc()

        for draft in data.items:
            if not draft.name.strip():
                continue
            await self.add_item_to_visit(visit.id, draft)

        for photo in data.photos:
            storage_path = photo.storage_path.strip()
            if not storage_path:
                continue
            await self.repos.visit_photos.add_to_visit(
                visit.id, storage_path, photo.caption
            )

        await self._promote_from_wishlist(visit.restaurant_id)
        return visit

    async def _promote_from_wishlist(self, restaurant_id: str) -> None:
        restaurant = await self.repos.restaurants.get(restaurant_id)
        if restaurant is None or restaurant.status != RestaurantStatus.WISHLIST:
            return

        await self.repos.restaurants.update(
            restaurant_id, RestaurantPatch(status=RestaurantStatus.ACTIVE)
        )
        restaurants_promoted_total.inc()
        logger.info(
            "Restaurant promoted from wishlist restaurant_id=%s",
            restaurant_id,
            extra={"restaurant_id": restaurant_id},
        )

    async def get_visit(self, visit_id: str) -> Optional[Visit]:
        return await self.repos.visits.get(visit_id)

    async def update_visit(self, visit_id: str, patch: VisitPatch) -> Visit:
        return await self.repos.visits.update(visit_id, patch)

    async def delete_visit(self, visit_id: str) -> None:
        await self.repos.visits.delete(visit_id)

    async def list_by_restaurant(self, restaurant_id: str) -> list[Visit]:
        return await self.repos.visits.list_by_restaurant(restaurant_id)

    async def list_items_by_visit(self, visit_id: str) -> list[VisitItem]:
        return await self.repos.visit_items.list_by_visit(visit_id)

    async def list_photos_by_visit(self, visit_id: str) -> list[VisitPhoto]:
        return await self.repos.visit_photos.list_by_visit(visit_id)

    async def add_item_to_visit(self, visit_id: str, draft: DraftItem) -> VisitItem:
        return await self.repos.visit_items.create(
            VisitItemCreate(
                visit_id=visit_id,
                name=draft.name,
                thumb=draft.thumb,
                notes=draft.notes,
            )
        )

    async def update_item(self, item_id: str, patch: VisitItemPatch) -> VisitItem:
        return await self.repos.visit_items.update(item_id, patch)

    async def delete_item(self, item_id: str) -> None:
        await self.repos.visit_items.delete(item_id)

    async def add_photo_to_visit(
        self, visit_id: str, storage_path: str, caption: Optional[str] = None
    ) -> VisitPhoto:
        return await self.repos.visit_photos.add_to_visit(
            visit_id, storage_path, caption
        )

    async def update_photo(self, photo_id: str, patch: VisitPhotoPatch) -> VisitPhoto:
        return await self.repos.visit_photos.update(photo_id, patch)

    async def delete_photo(self, photo_id: str) -> None:
        await self.repos.visit_photos.delete(photo_id)
