import logging
from datetime import datetime, timezone

from app.db.cascade import CascadePlan
from app.db.store import SnapshotStore
from app.metrics import entities_deleted_total
from app.schemas.entities import Snapshot

logger = logging.getLogger(__name__)


class SnapshotRepository:
    """Common plumbing for repositories backed by the snapshot store."""

    def __init__(self, store: SnapshotStore) -> None:
        self.store = store

    @staticmethod
    def now() -> datetime:
        return datetime.now(timezone.utc)

    async def _delete_cascade(self, snapshot: Snapshot, plan: CascadePlan) -> None:
        if plan.is_empty():
            return

        await self.store.save(plan.apply(snapshot))

        counts = plan.counts()
        for kind, count in counts.items():
            if count:
                entities_deleted_total.labels(kind=kind).inc(count)
        logger.info(
            "Deleted entities restaurants=%s visits=%s items=%s photos=%s",
            counts["restaurant"],
            counts["visit"],
            counts["item"],
            counts["photo"],
            extra=counts,
        )
