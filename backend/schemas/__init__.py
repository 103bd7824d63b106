from .region import Prefecture, Region
from .station import Station, StationDetail, StationUsage, StationWrite
from .place import DeleteResult, Place, PlaceWrite

__all__ = [
    "Region",
    "Prefecture",
    "StationWrite",
    "Station",
    "StationDetail",
    "StationUsage",
    "PlaceWrite",
    "Place",
    "DeleteResult",
]
