from typing import Iterable

from pydantic import BaseModel, Field

from app.schemas.entities import Snapshot


class CascadePlan(BaseModel):
    """Every id removed by a delete, collected before anything is removed."""

    restaurant_ids: set[str] = Field(default_factory=set)
    visit_ids: set[str] = Field(default_factory=set)
    item_ids: set[str] = Field(default_factory=set)
    photo_ids: set[str] = Field(default_factory=set)

    @classmethod
    def collect(
        cls,
        snapshot: Snapshot,
        restaurant_ids: Iterable[str] = (),
        visit_ids: Iterable[str] = (),
        item_ids: Iterable[str] = (),
        photo_ids: Iterable[str] = (),
    ) -> "CascadePlan":
        """Resolve the full descendant set of the given roots.

        Only ids present in the snapshot end up in the plan, so deleting an
        unknown id yields an empty plan.
        """
        plan = cls()
        wanted_restaurants = set(restaurant_ids)
        plan.restaurant_ids = {
            restaurant.id
            for restaurant in snapshot.restaurants
            if restaurant.id in wanted_restaurants
        }

        wanted_visits = set(visit_ids)
        plan.visit_ids = {
            visit.id
            for visit in snapshot.visits
            if visit.id in wanted_visits or visit.restaurant_id in plan.restaurant_ids
        }

        wanted_items = set(item_ids)
        plan.item_ids = {
            item.id
            for item in snapshot.visit_items
            if item.id in wanted_items or item.visit_id in plan.visit_ids
        }

        wanted_photos = set(photo_ids)
        plan.photo_ids = {
            photo.id
            for photo in snapshot.visit_photos
            if photo.id in wanted_photos or photo.visit_id in plan.visit_ids
        }
        return plan

    def is_empty(self) -> bool:
        return not (
            self.restaurant_ids or self.visit_ids or self.item_ids or self.photo_ids
        )

    def apply(self, snapshot: Snapshot) -> Snapshot:
        return Snapshot(
            restaurants=[
                r for r in snapshot.restaurants if r.id not in self.restaurant_ids
            ],
            visits=[v for v in snapshot.visits if v.id not in self.visit_ids],
            visit_items=[i for i in snapshot.visit_items if i.id not in self.item_ids],
            visit_photos=[
                p for p in snapshot.visit_photos if p.id not in self.photo_ids
            ],
        )

    def counts(self) -> dict[str, int]:
        return {
            "restaurant": len(self.restaurant_ids),
            "visit": len(self.visit_ids),
            "item": len(self.item_ids),
            "photo": len(self.photo_ids),
        }
