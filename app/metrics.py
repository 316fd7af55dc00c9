from prometheus_client import Counter

restaurants_created_total = Counter(
    "food_log_restaurants_created_total", "Total restaurants created", ["status"]
)

visits_created_total = Counter(
    "food_log_visits_created_total", "Total visits logged", ["service_type"]
)

restaurants_promoted_total = Counter(
    "food_log_restaurants_promoted_total",
    "Restaurants promoted from wishlist to active by a first visit",
)

entities_deleted_total = Counter(
    "food_log_entities_deleted_total",
    "Entities removed, including cascaded descendants",
    ["kind"],
)

snapshot_recoveries_total = Counter(
    "food_log_snapshot_recoveries_total",
    "Snapshot collections replaced by an empty list on load",
    ["collection"],
)

search_queries_total = Counter(
    "food_log_search_queries_total", "Total search queries served", ["kind"]
)
