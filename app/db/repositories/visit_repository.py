import logging
from typing import Iterable, Optional

from app.core.enums import IdPrefix
from app.db.cascade import CascadePlan
from app.db.repositories.base import SnapshotRepository
from app.exceptions import RestaurantNotFoundException, VisitNotFoundException
from app.schemas.entities import Visit
from app.schemas.visits import VisitCreate, VisitPatch

logger = logging.getLogger(__name__)


class VisitRepository(SnapshotRepository):

    async def list_all(self) -> list[Visit]:
        snapshot = await self.store.load()
        return list(snapshot.visits)

    async def list_by_restaurant(self, restaurant_id: str) -> list[Visit]:
        snapshot = await self.store.load()
        return [v for v in snapshot.visits if v.restaurant_id == restaurant_id]

    async def list_by_restaurants(
        self, restaurant_ids: Iterable[str]
    ) -> dict[str, list[Visit]]:
        """Group visits by restaurant in a single snapshot read."""
        grouped: dict[str, list[Visit]] = {rid: [] for rid in restaurant_ids}
        snapshot = await self.store.load()
        for visit in snapshot.visits:
            if visit.restaurant_id in grouped:
                grouped[visit.restaurant_id].append(visit)
        return grouped

    async def get(self, visit_id: str) -> Optional[Visit]:
        snapshot = await self.store.load()
        return next((v for v in snapshot.visits if v.id == visit_id), None)

    async def create(self, data: VisitCreate) -> Visit:
        snapshot = await self.store.load()
        if not any(r.id == data.restaurant_id for r in snapshot.restaurants):
            raise RestaurantNotFoundException(data.restaurant_id)

        visit = Visit(
            id=self.store.create_id(IdPrefix.VISIT),
            restaurant_id=data.restaurant_id,
            visit_date=data.visit_date,
            service_type=data.service_type,
            overall_thumb=data.overall_thumb,
            notes=data.notes,
            created_at=self.now(),
        )
        snapshot.visits.insert(0, visit)
        await self.store.save(snapshot)

        logger.info(
            "Created visit visit_id=%s restaurant_id=%s visit_date=%s",
            visit.id,
            visit.restaurant_id,
            visit.visit_date,
            extra={"visit_id": visit.id, "restaurant_id": visit.restaurant_id},
        )
        return visit

    async def update(self, visit_id: str, patch: VisitPatch) -> Visit:
        snapshot = await self.store.load()
        for idx, current in enumerate(snapshot.visits):
            if current.id == visit_id:
                updated = patch.apply(current)
                snapshot.visits[idx] = updated
                await self.store.save(snapshot)
                return updated
        raise VisitNotFoundException(visit_id)

    async def delete(self, visit_id: str) -> None:
        """Delete a visit with its items and photos. Unknown ids are a no-op."""
        snapshot = await self.store.load()
        plan = CascadePlan.collect(snapshot, visit_ids=[visit_id])
        await self._delete_cascade(snapshot, plan)
