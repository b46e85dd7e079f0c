"""Railway network model and built-in station data."""

from .graph import (
    InvalidStationIndexError,
    NegativeWeightError,
    RailwayGraph,
    RailwayLink,
    RailwayNetworkError,
    Station,
)
from .stations import SOUTHWEST_LINKS, SOUTHWEST_STATIONS, build_southwest_network

__all__ = [
    "RailwayGraph",
    "RailwayLink",
    "Station",
    "RailwayNetworkError",
    "InvalidStationIndexError",
    "NegativeWeightError",
    "SOUTHWEST_STATIONS",
    "SOUTHWEST_LINKS",
    "build_southwest_network",
]
