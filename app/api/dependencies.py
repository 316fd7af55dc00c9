from typing import Annotated

from fastapi import Depends, Request

from app.core.config import settings
from app.db.repositories import Repositories
from app.services import RestaurantService, SearchService, VisitService
from app.services.rating import RatingThresholds


def get_repositories(request: Request) -> Repositories:
    return request.app.state.repositories


RepositoriesDep = Annotated[Repositories, Depends(get_repositories)]


def get_rating_thresholds() -> RatingThresholds:
    return RatingThresholds(
        up_min=settings.rating_up_min, down_max=settings.rating_down_max
    )


ThresholdsDep = Annotated[RatingThresholds, Depends(get_rating_thresholds)]


def get_restaurant_service(
    repos: RepositoriesDep, thresholds: ThresholdsDep
) -> RestaurantService:
    return RestaurantService(repos, thresholds)


def get_visit_service(repos: RepositoriesDep) -> VisitService:
    return VisitService(repos)


def get_search_service(
    repos: RepositoriesDep, thresholds: ThresholdsDep
) -> SearchService:
    return SearchService(repos, thresholds)


RestaurantServiceDep = Annotated[RestaurantService, Depends(get_restaurant_service)]
VisitServiceDep = Annotated[VisitService, Depends(get_visit_service)]
SearchServiceDep = Annotated[SearchService, Depends(get_search_service)]
