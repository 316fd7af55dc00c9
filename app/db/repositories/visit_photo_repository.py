from typing import Optional

from app.core.enums import IdPrefix
from app.db.cascade import CascadePlan
from app.db.repositories.base import SnapshotRepository
from app.exceptions import VisitNotFoundException, VisitPhotoNotFoundException
from app.schemas.entities import VisitPhoto
from app.schemas.visits import VisitPhotoPatch


class VisitPhotoRepository(SnapshotRepository):

    async def list_by_visit(self, visit_id: str) -> list[VisitPhoto]:
        snapshot = await self.store.load()
        return [p for p in snapshot.visit_photos if p.visit_id == visit_id]

    async def get(self, photo_id: str) -> Optional[VisitPhoto]:
        snapshot = await self.store.load()
        return next((p for p in snapshot.visit_photos if p.id == photo_id), None)

    async def add_to_visit(
        self, visit_id: str, storage_path: str, caption: Optional[str] = None
    ) -> VisitPhoto:
        """Attach a photo reference to a visit. storage_path is opaque to this layer."""
        snapshot = await self.store.load()
        if not any(v.id == visit_id for v in snapshot.visits):
            raise VisitNotFoundException(visit_id)

        photo = VisitPhoto(
            id=self.store.create_id(IdPrefix.PHOTO),
            visit_id=visit_id,
            storage_path=storage_path,
            caption=caption,
            created_at=self.now(),
        )
        snapshot.visit_photos.append(photo)
        await self.store.save(snapshot)
        return photo

    async def update(self, photo_id: str, patch: VisitPhotoPatch) -> VisitPhoto:
        snapshot = await self.store.load()
        for idx, current in enumerate(snapshot.visit_photos):
            if current.id == photo_id:
                updated = patch.apply(current)
                snapshot.visit_photos[idx] = updated
                await self.store.save(snapshot)
                return updated
        raise VisitPhotoNotFoundException(photo_id)

    async def delete(self, photo_id: str) -> None:
        snapshot = await self.store.load()
        plan = CascadePlan.collect(snapshot, photo_ids=[photo_id])
        await self._delete_cascade(snapshot, plan)
