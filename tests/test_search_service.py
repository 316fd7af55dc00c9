from app.core.enums import RestaurantStatus, ServiceType, Thumb
from app.schemas.search import ItemSearchFilters, RestaurantSearchFilters
from app.services import RestaurantService, SearchService, VisitService
from tests.utils import RestaurantFactory, VisitFactory, create_visited_restaurant


async def _log(
    visit_service: VisitService,
    restaurant_id: str,
    visit_date: str,
    items: list[str],
    item_thumb: Thumb = Thumb.NEUTRAL,
    service_type: ServiceType = ServiceType.EAT_IN,
) -> str:
    visit = await visit_service.add_visit(
        VisitFactory.create_input(
            restaurant_id,
            visit_date=visit_date,
            items=items,
            item_thumb=item_thumb,
            service_type=service_type,
        )
    )
    return visit.id


class TestSearchRestaurants:
    async def test_matches_name_and_computes_summary(
        self,
        restaurant_service: RestaurantService,
        visit_service: VisitService,
        search_service: SearchService,
    ) -> None:
        taco_id = await create_visited_restaurant(
            restaurant_service,
            visit_service,
            "Taco Hut",
            [("2024-01-10", Thumb.UP), ("2024-02-10", Thumb.UP)],
        )
        await create_visited_restaurant(
            restaurant_service, visit_service, "Burger Barn", [("2024-01-10", Thumb.UP)]
        )
        wishlist = await restaurant_service.add_restaurant(
            RestaurantFactory.create_data(name="Taco Truck")
        )

        results = await search_service.search_restaurants("taco")

        by_id = {r.id: r for r in results}
        assert set(by_id) == {taco_id, wishlist.id}
        assert by_id[taco_id].computed_thumb == Thumb.UP
        assert by_id[taco_id].last_visited == "2024-02-10"
        assert by_id[wishlist.id].computed_thumb == Thumb.NEUTRAL
        assert by_id[wishlist.id].last_visited is None

    async def test_status_cuisine_and_thumb_filters(
        self,
        restaurant_service: RestaurantService,
        visit_service: VisitService,
        search_service: SearchService,
    ) -> None:
        good_id = await create_visited_restaurant(
            restaurant_service,
            visit_service,
            "Noodle Good",
            [("2024-01-10", Thumb.UP)],
            cuisines=["Chinese"],
        )
        await create_visited_restaurant(
            restaurant_service,
            visit_service,
            "Noodle Bad",
            [("2024-01-10", Thumb.DOWN)],
            cuisines=["Chinese"],
        )
        await restaurant_service.add_restaurant(
            RestaurantFactory.create_data(name="Noodle Dream", cuisines=["Chinese"])
        )

        results = await search_service.search_restaurants(
            "noodle",
            RestaurantSearchFilters(
                cuisines=["chinese"],
                status=RestaurantStatus.ACTIVE,
                thumbs=[Thumb.UP],
            ),
        )

        assert [r.id for r in results] == [good_id]


class TestSearchItems:
    async def test_joins_item_visit_and_restaurant(
        self,
        restaurant_service: RestaurantService,
        visit_service: VisitService,
        search_service: SearchService,
    ) -> None:
        restaurant = await restaurant_service.add_restaurant(
            RestaurantFactory.create_data(name="Taco Hut")
        )
        visit_id = await _log(
            visit_service, restaurant.id, "2024-01-10", ["Fish Taco", "Horchata"]
        )

        results = await search_service.search_items("taco")

        assert len(results) == 1
        assert results[0].item.name == "Fish Taco"
        assert results[0].visit.id == visit_id
        assert results[0].restaurant.id == restaurant.id
        assert results[0].restaurant.status == RestaurantStatus.ACTIVE

    async def test_orphaned_items_are_dropped(
        self,
        restaurant_service: RestaurantService,
        visit_service: VisitService,
        search_service: SearchService,
    ) -> None:
        restaurant = await restaurant_service.add_restaurant(
            RestaurantFactory.create_data()
        )
        visit_id = await _log(visit_service, restaurant.id, "2024-01-10", ["Taco"])

        await visit_service.delete_visit(visit_id)

        assert await search_service.search_items("taco") == []

    async def test_item_whose_visit_vanished_from_storage_is_dropped(
        self,
        restaurant_service: RestaurantService,
        visit_service: VisitService,
        search_service: SearchService,
    ) -> None:
        restaurant = await restaurant_service.add_restaurant(
            RestaurantFactory.create_data()
        )
        await _log(visit_service, restaurant.id, "2024-01-10", ["Taco"])
        store = search_service.repos.store
        snapshot = await store.load()
        snapshot.visits = []
        await store.save(snapshot)

        assert len(snapshot.visit_items) == 1
        assert await search_service.search_items("taco") == []

    async def test_filters(
        self,
        restaurant_service: RestaurantService,
        visit_service: VisitService,
        search_service: SearchService,
    ) -> None:
        mexican = await restaurant_service.add_restaurant(
            RestaurantFactory.create_data(name="Taco Hut", cuisines=["Mexican"])
        )
        fusion = await restaurant_service.add_restaurant(
            RestaurantFactory.create_data(name="Fusion Bar", cuisines=["Fusion"])
        )
        await _log(visit_service, mexican.id, "2024-01-10", ["Taco A"], Thumb.UP)
        await _log(
            visit_service,
            mexican.id,
            "2024-02-10",
            ["Taco B"],
            Thumb.UP,
            ServiceType.DELIVERY,
        )
        await _log(visit_service, mexican.id, "2024-03-10", ["Taco C"], Thumb.DOWN)
        await _log(visit_service, fusion.id, "2024-02-10", ["Taco D"], Thumb.UP)

        by_thumb = await search_service.search_items(
            "taco", ItemSearchFilters(thumbs=[Thumb.DOWN])
        )
        by_cuisine = await search_service.search_items(
            "taco", ItemSearchFilters(cuisines=["fusion"])
        )
        by_service = await search_service.search_items(
            "taco", ItemSearchFilters(service_types=[ServiceType.DELIVERY])
        )
        by_dates = await search_service.search_items(
            "taco", ItemSearchFilters(from_date="2024-02-10", to_date="2024-02-10")
        )
        combined = await search_service.search_items(
            "taco",
            ItemSearchFilters(
                thumbs=[Thumb.UP], cuisines=["Mexican"], from_date="2024-01-01"
            ),
        )

        assert [r.item.name for r in by_thumb] == ["Taco C"]
        assert [r.item.name for r in by_cuisine] == ["Taco D"]
        assert [r.item.name for r in by_service] == ["Taco B"]
        assert sorted(r.item.name for r in by_dates) == ["Taco B", "Taco D"]
        assert [r.item.name for r in combined] == ["Taco A", "Taco B"]

    async def test_empty_query_matches_every_item(
        self,
        restaurant_service: RestaurantService,
        visit_service: VisitService,
        search_service: SearchService,
    ) -> None:
        restaurant = await restaurant_service.add_restaurant(
            RestaurantFactory.create_data()
        )
        await _log(visit_service, restaurant.id, "2024-01-10", ["Taco", "Burrito"])

        results = await search_service.search_items("")

        assert [r.item.name for r in results] == ["Taco", "Burrito"]
