from .region import (
    get_regions,
    get_prefectures,
    get_prefecture_by_name,
    resolve_prefecture_id,
    resolve_place_location,
)
from .place import (
    PLACE_KINDS,
    PlaceKind,
    validate_walking_time,
    get_places,
    get_place,
    create_place,
    update_place,
    delete_place,
    count_station_usage,
    sync_places_with_station,
)
from .station import (
    get_station_names,
    get_stations_detailed,
    get_station,
    get_station_by_name,
    create_station,
    update_station,
    delete_station,
)

__all__ = [
    "get_regions",
    "get_prefectures",
    "get_prefecture_by_name",
    "resolve_prefecture_id",
    "resolve_place_location",
    "PLACE_KINDS",
    "PlaceKind",
    "validate_walking_time",
    "get_places",
    "get_place",
    "create_place",
    "update_place",
    "delete_place",
    "count_station_usage",
    "sync_places_with_station",
    "get_station_names",
    "get_stations_detailed",
    "get_station",
    "get_station_by_name",
    "create_station",
    "update_station",
    "delete_station",
]
