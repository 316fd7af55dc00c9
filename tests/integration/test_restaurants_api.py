import pytest
from httpx import AsyncClient


@pytest.mark.integration
class TestRestaurantsAPI:
    async def test_create_restaurant(
        self,
        client: AsyncClient,
        sample_restaurant_data: dict,
    ) -> None:
        response = await client.post("/v1/restaurants", json=sample_restaurant_data)

        assert response.status_code == 201
        data = response.json()

        assert data["id"].startswith("rest_")
        assert data["name"] == "Taco Hut"
        assert data["status"] == "wishlist"
        assert data["cuisines"] == ["Mexican"]
        assert data["created_at"] == data["updated_at"]

    async def test_create_restaurant_requires_name(self, client: AsyncClient) -> None:
        response = await client.post("/v1/restaurants", json={"name": "   "})

        assert response.status_code == 422

    async def test_list_wishlist(
        self,
        client: AsyncClient,
        sample_restaurant_data: dict,
    ) -> None:
        await client.post("/v1/restaurants", json=sample_restaurant_data)
        await client.post(
            "/v1/restaurants",
            json={"name": "Ramen Ya", "cuisines": ["Japanese"], "status": "active"},
        )

        response = await client.get(
            "/v1/restaurants/wishlist", params={"cuisines": ["mexican", "thai"]}
        )

        assert response.status_code == 200
        assert [r["name"] for r in response.json()] == ["Taco Hut"]

    async def test_details_not_found(self, client: AsyncClient) -> None:
        response = await client.get("/v1/restaurants/rest_missing")

        assert response.status_code == 404
        data = response.json()
        assert data["success"] is False
        assert data["error"]["code"] == "RESTAURANT_NOT_FOUND"
        assert data["error"]["details"] == {"restaurant_id": "rest_missing"}
        assert data["meta"]["path"] == "/v1/restaurants/rest_missing"

    async def test_update_restaurant(
        self,
        client: AsyncClient,
        sample_restaurant_data: dict,
    ) -> None:
        created = (await client.post("/v1/restaurants", json=sample_restaurant_data)).json()

        response = await client.patch(
            f"/v1/restaurants/{created['id']}",
            json={"cuisines": ["Mexican", "Street Food"], "notes": "Cash only"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["cuisines"] == ["Mexican", "Street Food"]
        assert data["notes"] == "Cash only"
        assert data["name"] == "Taco Hut"

    async def test_update_unknown_restaurant(self, client: AsyncClient) -> None:
        response = await client.patch("/v1/restaurants/rest_missing", json={"name": "X"})

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "RESTAURANT_NOT_FOUND"

    async def test_set_status_twice(
        self,
        client: AsyncClient,
        sample_restaurant_data: dict,
    ) -> None:
        created = (await client.post("/v1/restaurants", json=sample_restaurant_data)).json()
        url = f"/v1/restaurants/{created['id']}/status"

        first = await client.put(url, json={"status": "archived"})
        second = await client.put(url, json={"status": "archived"})

        assert first.status_code == second.status_code == 200
        assert first.json()["status"] == second.json()["status"] == "archived"

    async def test_set_invalid_status(
        self,
        client: AsyncClient,
        sample_restaurant_data: dict,
    ) -> None:
        created = (await client.post("/v1/restaurants", json=sample_restaurant_data)).json()

        response = await client.put(
            f"/v1/restaurants/{created['id']}/status", json={"status": "closed"}
        )

        assert response.status_code == 422

    async def test_delete_restaurant(
        self,
        client: AsyncClient,
        sample_restaurant_data: dict,
        sample_visit_data: dict,
    ) -> None:
        created = (await client.post("/v1/restaurants", json=sample_restaurant_data)).json()
        visit = (
            await client.post(
                "/v1/visits", json={"restaurant_id": created["id"], **sample_visit_data}
            )
        ).json()

        response = await client.delete(f"/v1/restaurants/{created['id']}")
        again = await client.delete(f"/v1/restaurants/{created['id']}")

        assert response.status_code == 204
        assert again.status_code == 204
        assert (await client.get(f"/v1/restaurants/{created['id']}")).status_code == 404
        assert (await client.get(f"/v1/visits/{visit['id']}")).status_code == 404
        assert (await client.get(f"/v1/visits/{visit['id']}/items")).json() == []

    async def test_list_visited_sorted_and_filtered(self, client: AsyncClient) -> None:
        for name, visits in (
            ("Often", ["2024-01-01", "2024-01-02", "2024-01-03"]),
            ("Once", ["2024-04-01"]),
        ):
            created = (await client.post("/v1/restaurants", json={"name": name})).json()
            for visit_date in visits:
                await client.post(
                    "/v1/visits",
                    json={
                        "restaurant_id": created["id"],
                        "visit_date": visit_date,
                        "service_type": "takeaway",
                        "overall_thumb": "up",
                    },
                )

        most = await client.get(
            "/v1/restaurants/visited", params={"sort_by": "most_visited"}
        )
        recent = await client.get("/v1/restaurants/visited")
        filtered = await client.get(
            "/v1/restaurants/visited",
            params={"from_date": "2024-03-01", "service_types": ["takeaway"]},
        )

        assert [r["name"] for r in most.json()] == ["Often", "Once"]
        assert [r["name"] for r in recent.json()] == ["Once", "Often"]
        assert [r["name"] for r in filtered.json()] == ["Once"]
        assert most.json()[0]["thumbs_breakdown"] == {"up": 3, "neutral": 0, "down": 0}

    async def test_list_visited_rejects_bad_date(self, client: AsyncClient) -> None:
        response = await client.get(
            "/v1/restaurants/visited", params={"from_date": "01/02/2024"}
        )

        assert response.status_code == 422
