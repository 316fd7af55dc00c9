import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import delete, select  # noqa: E402

from app.core.config import settings  # noqa: E402
from app.db.models import SnapshotBlob  # noqa: E402
from app.db.session import AsyncSessionLocal, init_db  # noqa: E402
from app.db.store import SnapshotStore  # noqa: E402


async def reset_database() -> bool:
    """Removes the stored snapshot so the next load starts empty.

    Returns:
        bool: True if reset was successful, False otherwise.
    """
    print("Starting snapshot reset...")
    print("-" * 60)

    await init_db()
    store = SnapshotStore(AsyncSessionLocal, key=settings.snapshot_key)
    before = await store.load()
    print(f"  Restaurants: {len(before.restaurants)} records")
    print(f"  Visits: {len(before.visits)} records")
    print(f"  Visit items: {len(before.visit_items)} records")
    print(f"  Visit photos: {len(before.visit_photos)} records")

    async with AsyncSessionLocal() as session:
        try:
            async with session.begin():
                await session.execute(
                    delete(SnapshotBlob).where(SnapshotBlob.key == settings.snapshot_key)
                )
            result = await session.execute(
                select(SnapshotBlob.key).where(SnapshotBlob.key == settings.snapshot_key)
            )
            remaining = result.scalar_one_or_none()
        except Exception as e:
            print(f"\nError during reset: {e}")
            return False

    print("-" * 60)
    print("Snapshot reset successful" if remaining is None else "Snapshot still present")
    return remaining is None


async def confirm_reset() -> bool:
    """Prompts user for confirmation before resetting the snapshot.

    Returns:
        bool: True if user confirms, False otherwise.
    """
    print("\nWARNING: This operation will delete ALL restaurants, visits, items and photos")
    print(f"Snapshot key: {settings.snapshot_key}")
    print("\nDo you want to continue? (yes/no): ", end="")

    response = input().strip().lower()
    return response in ["yes", "y"]


async def main():
    print("\n" + "=" * 60)
    print("FOOD LOG RESET")
    print("=" * 60)

    if not await confirm_reset():
        print("\nOperation cancelled by user")
        sys.exit(0)

    success = await reset_database()

    if success:
        print("\nReset complete. Food log is empty.")
        sys.exit(0)
    else:
        print("\nReset failed. Check logs for details.")
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
