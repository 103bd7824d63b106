from .region import Prefecture, Region
from .station import Station
from .place import Bar, Bookstore, Cafe, PlaceMixin

__all__ = [
    "Region",
    "Prefecture",
    "Station",
    "PlaceMixin",
    "Cafe",
    "Bookstore",
    "Bar",
]
