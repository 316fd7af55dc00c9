from typing import Optional

from app.core.enums import IdPrefix
from app.db.cascade import CascadePlan
from app.db.repositories.base import SnapshotRepository
from app.exceptions import VisitItemNotFoundException, VisitNotFoundException
from app.schemas.entities import VisitItem
from app.schemas.visits import VisitItemCreate, VisitItemPatch


class VisitItemRepository(SnapshotRepository):

    async def list_by_visit(self, visit_id: str) -> list[VisitItem]:
        snapshot = await self.store.load()
        return [i for i in snapshot.visit_items if i.visit_id == visit_id]

    async def search(self, query: str) -> list[VisitItem]:
        """Case-insensitive substring match on item name, in storage order."""
        needle = query.strip().lower()
        snapshot = await self.store.load()
        return [i for i in snapshot.visit_items if needle in i.name.lower()]

    async def get(self, item_id: str) -> Optional[VisitItem]:
        snapshot = await self.store.load()
        return next((i for i in snapshot.visit_items if i.id == item_id), None)

    async def create(self, data: VisitItemCreate) -> VisitItem:
        snapshot = await self.store.load()
        if not any(v.id == data.visit_id for v in snapshot.visits):
            raise VisitNotFoundException(data.visit_id)

        item = VisitItem(
            id=self.store.create_id(IdPrefix.ITEM),
            visit_id=data.visit_id,
            name=data.name,
            thumb=data.thumb,
            notes=data.notes,
            created_at=self.now(),
        )
        snapshot.visit_items.append(item)
        await self.store.save(snapshot)
        return item

    async def update(self, item_id: str, patch: VisitItemPatch) -> VisitItem:
        snapshot = await self.store.load()
        for idx, current in enumerate(snapshot.visit_items):
            if current.id == item_id:
                updated = patch.apply(current)
                snapshot.visit_items[idx] = updated
                await self.store.save(snapshot)
                return updated
        raise VisitItemNotFoundException(item_id)

    async def delete(self, item_id: str) -> None:
        snapshot = await self.store.load()
        plan = CascadePlan.collect(snapshot, item_ids=[item_id])
        await self._delete_cascade(snapshot, plan)
