from typing import Sequence

from app.core.enums import Thumb
from app.schemas.entities import Visit
from app.schemas.restaurants import RestaurantSummary, ThumbsBreakdown
from app.services.rating import RatingThresholds, compute_restaurant_thumb


def summarize_visits(
    visits: Sequence[Visit], thresholds: RatingThresholds
) -> RestaurantSummary:
    """Computed thumb, visit count, latest visit date and per-thumb counts."""
    breakdown = ThumbsBreakdown(
        up=sum(1 for v in visits if v.overall_thumb == Thumb.UP),
        neutral=sum(1 for v in visits if v.overall_thumb == Thumb.NEUTRAL),
        down=sum(1 for v in visits if v.overall_thumb == Thumb.DOWN),
    )
    # ISO dates order lexicographically.
    last_visited = max((v.visit_date for v in visits), default=None)

    return RestaurantSummary(
        computed_thumb=compute_restaurant_thumb(visits, thresholds),
        visit_count=len(visits),
        last_visited=last_visited,
        thumbs_breakdown=breakdown,
    )
