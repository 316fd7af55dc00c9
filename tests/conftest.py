from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from app.api.dependencies import get_repositories
from app.db.repositories import Repositories
from app.db.session import build_engine, init_db
from app.db.store import SnapshotStore
from app.main import app
from app.services import RestaurantService, SearchService, VisitService


@pytest_asyncio.fixture(scope="function")
async def db_engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'food_log_test.db'}")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def store(db_engine: AsyncEngine) -> SnapshotStore:
    return SnapshotStore(
        async_sessionmaker(db_engine, expire_on_commit=False), key="test-snapshot"
    )


@pytest.fixture
def repos(store: SnapshotStore) -> Repositories:
    return Repositories(store)


@pytest.fixture
def restaurant_service(repos: Repositories) -> RestaurantService:
    return RestaurantService(repos)


@pytest.fixture
def visit_service(repos: Repositories) -> VisitService:
    return VisitService(repos)


@pytest.fixture
def search_service(repos: Repositories) -> SearchService:
    return SearchService(repos)


@pytest_asyncio.fixture(scope="function")
async def client(repos: Repositories) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides[get_repositories] = lambda: repos
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def sample_restaurant_data() -> dict:
    return {"name": "Taco Hut", "cuisines": ["Mexican"], "status": "wishlist"}


@pytest.fixture
def sample_visit_data() -> dict:
    return {
        "visit_date": "2024-01-10",
        "service_type": "eat_in",
        "overall_thumb": "up",
        "notes": "Great salsa bar",
        "items": [
            {"name": "Al pastor taco", "thumb": "up"},
            {"name": "   ", "thumb": "down"},
        ],
        "photos": [
            {"storage_path": "photos/taco-hut/1.jpg", "caption": "Tacos"},
            {"storage_path": ""},
        ],
    }
