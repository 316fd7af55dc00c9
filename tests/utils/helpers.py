from datetime import datetime, timezone

from app.core.enums import ServiceType, Thumb
from app.schemas.entities import Visit
from app.services import RestaurantService, VisitService
from tests.utils.factories import RestaurantFactory, VisitFactory


def make_visit(
    overall_thumb: Thumb,
    visit_date: str = "2024-01-10",
    restaurant_id: str = "rest_test",
    service_type: ServiceType = ServiceType.EAT_IN,
) -> Visit:
    """Build a Visit in memory, without touching the store."""
    return Visit(
        id=f"visit_{overall_thumb.value}_{visit_date}",
        restaurant_id=restaurant_id,
        visit_date=visit_date,
        service_type=service_type,
        overall_thumb=overall_thumb,
        created_at=datetime.now(timezone.utc),
    )


async def create_visited_restaurant(
    restaurant_service: RestaurantService,
    visit_service: VisitService,
    name: str,
    visits: list[tuple[str, Thumb]],
    cuisines: list[str] | None = None,
    service_type: ServiceType = ServiceType.EAT_IN,
) -> str:
    """Create a wishlist restaurant and log (visit_date, thumb) visits on it."""
    restaurant = await restaurant_service.add_restaurant(
        RestaurantFactory.create_data(name=name, cuisines=cuisines)
    )
    for visit_date, thumb in visits:
        await visit_service.add_visit(
            VisitFactory.create_input(
                restaurant.id,
                visit_date=visit_date,
                overall_thumb=thumb,
                service_type=service_type,
            )
        )
    return restaurant.id
