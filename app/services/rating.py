from typing import Sequence

from pydantic import BaseModel, ConfigDict

from app.core.enums import Thumb
from app.schemas.entities import Visit

SCORE_BY_THUMB: dict[Thumb, int] = {
    Thumb.UP: 1,
    Thumb.NEUTRAL: 0,
    Thumb.DOWN: -1,
}

# Ordering weight for "rating" sorts, distinct from the averaging score above.
SORT_SCORE_BY_THUMB: dict[Thumb, int] = {
    Thumb.UP: 2,
    Thumb.NEUTRAL: 1,
    Thumb.DOWN: 0,
}


class RatingThresholds(BaseModel):
    model_config = ConfigDict(frozen=True)

    up_min: float = 0.33
    down_max: float = -0.33


DEFAULT_THRESHOLDS = RatingThresholds()


def compute_restaurant_thumb(
    visits: Sequence[Visit], thresholds: RatingThresholds = DEFAULT_THRESHOLDS
) -> Thumb:
    """Aggregate a restaurant's sentiment from the mean score of its visits.

    up=+1, neutral=0, down=-1. The mean must be strictly above up_min for
    ``up`` and strictly below down_max for ``down``. No visits gives ``neutral``.
    """
    if not visits:
        return Thumb.NEUTRAL

    average = sum(SCORE_BY_THUMB[visit.overall_thumb] for visit in visits) / len(
        visits
    )

    if average > thresholds.up_min:
        return Thumb.UP
    if average < thresholds.down_max:
        return Thumb.DOWN
    return Thumb.NEUTRAL
