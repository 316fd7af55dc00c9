import logging
from typing import Optional

from app.core.enums import RestaurantStatus, VisitedSort
from app.db.repositories import Repositories
from app.exceptions import RestaurantNotFoundException
from app.metrics import restaurants_created_total
from app.schemas.entities import Restaurant, Visit
from app.schemas.restaurants import (
    RestaurantCreate,
    RestaurantDetails,
    RestaurantListFilters,
    RestaurantOverview,
    RestaurantPatch,
    VisitDetails,
    VisitedFilters,
)
from app.services.rating import (
    DEFAULT_THRESHOLDS,
    SORT_SCORE_BY_THUMB,
    RatingThresholds,
)
from app.services.summary import summarize_visits

logger = logging.getLogger(__name__)


def _passes_visit_filters(visits: list[Visit], filters: VisitedFilters) -> bool:
    # Each bound is existential on its own: some visit on/after from_date and
    # some (possibly different) visit on/before to_date.
    if filters.from_date and not any(
        v.visit_date >= filters.from_date for v in visits
    ):
        return False
    if filters.to_date and not any(v.visit_date <= filters.to_date for v in visits):
        return False
    if filters.service_types and not any(
        v.service_type in filters.service_types for v in visits
    ):
        return False
    return True


def sort_overviews(
    overviews: list[RestaurantOverview], sort_by: VisitedSort
) -> list[RestaurantOverview]:
    if sort_by == VisitedSort.NAME:
        return sorted(overviews, key=lambda r: r.name.lower())
    if sort_by == VisitedSort.MOST_VISITED:
        return sorted(overviews, key=lambda r: r.visit_count, reverse=True)
    if sort_by == VisitedSort.RATING:
        return sorted(
            overviews,
            key=lambda r: (SORT_SCORE_BY_THUMB[r.computed_thumb], r.visit_count),
            reverse=True,
        )
    return sorted(overviews, key=lambda r: r.last_visited or "", reverse=True)


class RestaurantService:
    def __init__(
        self,
        repos: Repositories,
        thresholds: RatingThresholds = DEFAULT_THRESHOLDS,
    ) -> None:
        self.repos = repos
        self.thresholds = thresholds

    async def add_restaurant(self, data: RestaurantCreate) -> Restaurant:
        restaurant = await self.repos.restaurants.create(data)
        restaurants_created_total.labels(status=restaurant.status.value).inc()
        return restaurant

    async def update_restaurant(
        self, restaurant_id: str, patch: RestaurantPatch
    ) -> Restaurant:
        return await self.repos.restaurants.update(restaurant_id, patch)

    async def set_restaurant_status(
        self, restaurant_id: str, status: RestaurantStatus
    ) -> Restaurant:
        return await self.repos.restaurants.update(
            restaurant_id, RestaurantPatch(status=status)
        )

    async def delete_restaurant(self, restaurant_id: str) -> None:
        await self.repos.restaurants.delete(restaurant_id)

    async def get_restaurant(self, restaurant_id: str) -> Optional[Restaurant]:
        return await self.repos.restaurants.get(restaurant_id)

    async def get_or_create_by_name(
        self,
        name: str,
        status: RestaurantStatus = RestaurantStatus.ACTIVE,
    ) -> tuple[Restaurant, bool]:
        """Return the restaurant with this name (case-insensitive) or create it.

        Returns:
            Tuple of (Restaurant, created flag).
        """
        existing = await self.repos.restaurants.find_by_name(name)
        if existing:
            return existing, False

        restaurant = await self.add_restaurant(
            RestaurantCreate(name=name, status=status)
        )
        return restaurant, True

    async def list_wishlist(
        self, filters: Optional[RestaurantListFilters] = None
    ) -> list[Restaurant]:
        filters = filters or RestaurantListFilters()
        return await self.repos.restaurants.list(
            filters.model_copy(update={"status": RestaurantStatus.WISHLIST})
        )

    async def list_visited(
        self,
        filters: Optional[VisitedFilters] = None,
        sort_by: VisitedSort = VisitedSort.RECENTLY_VISITED,
    ) -> list[RestaurantOverview]:
        """List active restaurants with their visit summaries.

        Filters on thumbs, dates and service types are applied after
        aggregation. Date and service filters keep a restaurant when at least
        one of its visits matches.
        """
        filters = filters or VisitedFilters()
        restaurants = await self.repos.restaurants.list(
            RestaurantListFilters(
                status=RestaurantStatus.ACTIVE,
                search=filters.search,
                cuisines=filters.cuisines,
            )
        )
        visits_by_restaurant = await self.repos.visits.list_by_restaurants(
            r.id for r in restaurants
        )

        overviews: list[RestaurantOverview] = []
        for restaurant in restaurants:
            visits = visits_by_restaurant[restaurant.id]
            summary = summarize_visits(visits, self.thresholds)

            if filters.thumbs and summary.computed_thumb not in filters.thumbs:
                continue
            if not _passes_visit_filters(visits, filters):
                continue

            overviews.append(RestaurantOverview.build(restaurant, summary))

        return sort_overviews(overviews, sort_by)

    async def get_restaurant_details(self, restaurant_id: str) -> RestaurantDetails:
        """Restaurant with its summary and every visit, newest visit first."""
        restaurant = await self.repos.restaurants.get(restaurant_id)
        if restaurant is None:
            raise RestaurantNotFoundException(restaurant_id)

        visits = await self.repos.visits.list_by_restaurant(restaurant_id)
        details = [
            VisitDetails(
                visit=visit,
                items=await self.repos.visit_items.list_by_visit(visit.id),
                photos=await self.repos.visit_photos.list_by_visit(visit.id),
            )
            for visit in sorted(visits, key=lambda v: v.visit_date, reverse=True)
        ]

        return RestaurantDetails(
            restaurant=restaurant,
            summary=summarize_visits(visits, self.thresholds),
            visits=details,
        )
