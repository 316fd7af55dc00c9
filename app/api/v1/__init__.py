from fastapi import APIRouter

from app.api.v1 import restaurants, search, visits

api_router = APIRouter()

api_router.include_router(
    restaurants.router, prefix="/restaurants", tags=["restaurants"]
)
api_router.include_router(visits.router, tags=["visits"])
api_router.include_router(search.router, prefix="/search", tags=["search"])
