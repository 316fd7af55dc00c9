import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.middlewares import register_exception_handlers
from app.api.v1 import api_router
from app.core.config import settings
from app.db.repositories import Repositories
from app.db.session import AsyncSessionLocal, engine, init_db
from app.db.store import SnapshotStore

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s - %(name)s - %(message)s",
    handlers=[logging.StreamHandler()],
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    if settings.auto_create_schema:
        await init_db()
    store = SnapshotStore(AsyncSessionLocal, key=settings.snapshot_key)
    app.state.repositories = Repositories(store)
    yield
    await engine.dispose()


app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    debug=settings.api_debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(api_router, prefix="/v1")

@app.get("/health")
async def health_check() -> dict:
    return {"status": "healthy"}
