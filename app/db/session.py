from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from app.core.config import settings
from app.db.base import Base
from app.db import models  # noqa: F401  registers tables on Base.metadata


def build_engine(database_url: str) -> AsyncEngine:
    engine_kwargs: dict = {}
    if not database_url.startswith("sqlite"):
        engine_kwargs["pool_size"] = settings.database_pool_size
        engine_kwargs["max_overflow"] = settings.database_max_overflow
    return create_async_engine(database_url, **engine_kwargs)


engine = build_engine(settings.database_url)

AsyncSessionLocal = async_sessionmaker(engine, expire_on_commit=False)


async def init_db(target: AsyncEngine = engine) -> None:
    """Create the snapshot table if it does not exist yet."""
    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
