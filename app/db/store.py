import json
import logging
from typing import Any
from uuid import uuid4

from pydantic import TypeAdapter, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.enums import IdPrefix
from app.db.models import SnapshotBlob
from app.metrics import snapshot_recoveries_total
from app.schemas.entities import Restaurant, Snapshot, Visit, VisitItem, VisitPhoto

logger = logging.getLogger(__name__)

_COLLECTIONS: dict[str, tuple[str, TypeAdapter]] = {
    "restaurants": ("restaurants", TypeAdapter(list[Restaurant])),
    "visits": ("visits", TypeAdapter(list[Visit])),
    "visitItems": ("visit_items", TypeAdapter(list[VisitItem])),
    "visitPhotos": ("visit_photos", TypeAdapter(list[VisitPhoto])),
}


class SnapshotStore:
    """Loads and saves the whole snapshot as a single blob row.

    Every repository call is a read-modify-write of the full snapshot.
    There is no locking: concurrent writers race and the last save wins.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        key: str = "food-tracker-local-db-v1",
    ) -> None:
        self.session_factory = session_factory
        self.key = key

    async def load(self) -> Snapshot:
        """Return the stored snapshot.

        A missing row, a payload that is not a JSON object, or an invalid
        collection never raises: each affected collection comes back empty.
        """
        async with self.session_factory() as session:
            blob = await session.get(SnapshotBlob, self.key)

        if blob is None:
            return Snapshot()

        try:
            raw = json.loads(blob.payload)
        except ValueError:
            self._record_recovery("*", "payload is not valid JSON")
            return Snapshot()

        if not isinstance(raw, dict):
            self._record_recovery("*", "payload is not a JSON object")
            return Snapshot()

        return Snapshot(**self._parse_collections(raw))

    async def save(self, snapshot: Snapshot) -> None:
        payload = snapshot.model_dump_json(by_alias=True)
        async with self.session_factory() as session:
            async with session.begin():
                await session.merge(SnapshotBlob(key=self.key, payload=payload))

    @staticmethod
    def create_id(prefix: IdPrefix | str) -> str:
        prefix_value = prefix.value if isinstance(prefix, IdPrefix) else prefix
        return f"{prefix_value}_{uuid4()}"

    def _parse_collections(self, raw: dict[str, Any]) -> dict[str, list]:
        collections: dict[str, list] = {}
        for alias, (field_name, adapter) in _COLLECTIONS.items():
            if alias not in raw:
                collections[field_name] = []
                continue
            try:
                collections[field_name] = adapter.validate_python(raw[alias])
            except ValidationError as exc:
                self._record_recovery(alias, f"{exc.error_count()} validation errors")
                collections[field_name] = []
        return collections

    def _record_recovery(self, collection: str, reason: str) -> None:
        logger.warning(
            "Corrupt snapshot data replaced with empty collection key=%s collection=%s reason=%s",
            self.key,
            collection,
            reason,
            extra={"snapshot_key": self.key, "collection": collection},
        )
        snapshot_recoveries_total.labels(collection=collection).inc()
