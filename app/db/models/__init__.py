from app.db.models.snapshot import SnapshotBlob

__all__ = ["SnapshotBlob"]
