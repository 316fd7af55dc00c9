import argparse
import asyncio
from typing import Any

import httpx

DEMO_DATA: list[dict[str, Any]] = [
    {
        "restaurant": {"name": "Taco Hut", "cuisines": ["Mexican"]},
        "visits": [
            {
                "visit_date": "2024-01-10",
                "service_type": "eat_in",
                "overall_thumb": "up",
                "items": [
                    {"name": "Al pastor taco", "thumb": "up"},
                    {"name": "Horchata", "thumb": "neutral"},
                ],
            },
            {
                "visit_date": "2024-03-02",
                "service_type": "takeaway",
                "overall_thumb": "up",
                "items": [{"name": "Fish taco", "thumb": "up"}],
            },
        ],
    },
    {
        "restaurant": {"name": "Sushi House", "cuisines": ["Japanese", "Sushi"]},
        "visits": [
            {
                "visit_date": "2024-02-14",
                "service_type": "eat_in",
                "overall_thumb": "neutral",
                "items": [{"name": "Salmon nigiri", "thumb": "up"}],
            },
            {
                "visit_date": "2024-04-20",
                "service_type": "delivery",
                "overall_thumb": "down",
                "items": [{"name": "Spicy tuna roll", "thumb": "down"}],
            },
        ],
    },
    {
        "restaurant": {"name": "Pasta Italiana", "cuisines": ["Italian"]},
        "visits": [],
    },
]


async def seed(api_url: str, timeout: float = 30.0) -> None:
    api_url = api_url.rstrip("/")
    print("Seeding demo food log via API...\n")

    async with httpx.AsyncClient(timeout=timeout) as client:
        for entry in DEMO_DATA:
            name = entry["restaurant"]["name"]
            response = await client.post(f"{api_url}/v1/restaurants", json=entry["restaurant"])
            if response.status_code != 201:
                print(f"Failed to create {name} - {response.status_code}: {response.text[:200]}")
                continue

            restaurant_id = response.json()["id"]
            print(f"Created {name} ({restaurant_id})")

            for visit in entry["visits"]:
                response = await client.post(
                    f"{api_url}/v1/visits",
                    json={"restaurant_id": restaurant_id, **visit},
                )
                if response.status_code == 201:
                    print(f"  Logged visit on {visit['visit_date']}")
                else:
                    print(f"  Failed visit {visit['visit_date']} - {response.status_code}: {response.text[:200]}")

        print("\n--- Verification ---")
        response = await client.get(f"{api_url}/v1/restaurants/visited", params={"sort_by": "rating"})
        for restaurant in response.json():
            print(
                f"{restaurant['name']}: {restaurant['computed_thumb']} "
                f"({restaurant['visit_count']} visits, last {restaurant['last_visited']})"
            )
        response = await client.get(f"{api_url}/v1/restaurants/wishlist")
        print(f"Wishlist: {[r['name'] for r in response.json()]}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the food log with demo data")
    parser.add_argument("--api-url", default="http://localhost:8000")
    args = parser.parse_args()
    asyncio.run(seed(args.api_url))


if __name__ == "__main__":
    main()
