import logging
from typing import Optional

from app.db.repositories import Repositories
from app.metrics import search_queries_total
from app.schemas.restaurants import RestaurantListFilters, RestaurantOverview
from app.schemas.search import (
    ItemSearchFilters,
    RestaurantSearchFilters,
    SearchItemResult,
)
from app.services.rating import DEFAULT_THRESHOLDS, RatingThresholds
from app.services.summary import summarize_visits

logger = logging.getLogger(__name__)


class SearchService:
    def __init__(
        self,
        repos: Repositories,
        thresholds: RatingThresholds = DEFAULT_THRESHOLDS,
    ) -> None:
        self.repos = repos
        self.thresholds = thresholds

    async def search_restaurants(
        self, query: str, filters: Optional[RestaurantSearchFilters] = None
    ) -> list[RestaurantOverview]:
        filters = filters or RestaurantSearchFilters()
        search_queries_total.labels(kind="restaurants").inc()

        restaurants = await self.repos.restaurants.list(
            RestaurantListFilters(
                status=filters.status, search=query, cuisines=filters.cuisines
            )
        )
        visits_by_restaurant = await self.repos.visits.list_by_restaurants(
            r.id for r in restaurants
        )

        results: list[RestaurantOverview] = []
        for restaurant in restaurants:
            summary = summarize_visits(
                visits_by_restaurant[restaurant.id], self.thresholds
            )
            if filters.thumbs and summary.computed_thumb not in filters.thumbs:
                continue
            results.append(RestaurantOverview.build(restaurant, summary))
        return results

    async def search_items(
        self, query: str, filters: Optional[ItemSearchFilters] = None
    ) -> list[SearchItemResult]:
        """Match items by name and join each to its visit and restaurant.

        Items whose visit or restaurant no longer exists are dropped. Results
        keep item storage order; no ranking, no deduplication.
        """
        filters = filters or ItemSearchFilters()
        search_queries_total.labels(kind="items").inc()

        items = await self.repos.visit_items.search(query)
        visits = {v.id: v for v in await self.repos.visits.list_all()}
        restaurants = {
            r.id: r
            for r in await self.repos.restaurants.list(
                RestaurantListFilters(cuisines=filters.cuisines)
            )
        }

        results: list[SearchItemResult] = []
        for item in items:
            visit = visits.get(item.visit_id)
            if visit is None:
                continue
            restaurant = restaurants.get(visit.restaurant_id)
            if restaurant is None:
                continue

            if filters.thumbs and item.thumb not in filters.thumbs:
                continue
            if filters.service_types and visit.service_type not in filters.service_types:
                continue
            if filters.from_date and visit.visit_date < filters.from_date:
                continue
            if filters.to_date and visit.visit_date > filters.to_date:
                continue

            results.append(
                SearchItemResult(item=item, visit=visit, restaurant=restaurant)
            )

        logger.info(
            "Item search query=%r matches=%s results=%s",
            query,
            len(items),
            len(results),
            extra={"query": query, "results": len(results)},
        )
        return results
