"""Railway graph model: stations, links and the direct distance matrix."""

import logging
import math
from dataclasses import dataclass

import networkx as nx

logger = logging.getLogger(__name__)


class RailwayNetworkError(Exception):
    """Base error for invalid railway network operations."""


class InvalidStationIndexError(RailwayNetworkError, IndexError):
    """A station index outside [0, N) was used."""

    def __init__(self, station: int, num_stations: int):
        super().__init__(
            f"Station index {station} out of range for {num_stations} stations"
        )
        self.station = station
        self.num_stations = num_stations


class NegativeWeightError(RailwayNetworkError, ValueError):
    """A link distance was negative or not a finite number."""

    def __init__(self, distance_km: float):
        super().__init__(
            f"Link distance must be a finite non-negative number, got {distance_km}"
        )
        self.distance_km = distance_km


def check_station_index(station: int, num_stations: int) -> None:
    """
    Validate a station index against a network of num_stations stations.

    Only plain ints are indices; bools and floats are rejected.

    Raises:
        InvalidStationIndexError: if station is not an int in [0, num_stations)
    """
    if isinstance(station, bool) or not isinstance(station, int):
        raise InvalidStationIndexError(station, num_stations)
    if not 0 <= station < num_stations:
        raise InvalidStationIndexError(station, num_stations)


@dataclass(frozen=True)
class Station:
    """A station identified by its index in the network."""

    index: int
    name: str


@dataclass(frozen=True)
class RailwayLink:
    """Undirected railway connection between two stations."""

    origin: int
    destination: int
    distance_km: float


class RailwayGraph:
    """
    Graph representation of a fixed railway network.

    Stations are indexed 0..N-1 in the order their names were given.
    Links are stored twice: as a list (duplicates kept, used by Kruskal) and
    as a symmetric N x N matrix of direct distances (used by Floyd-Warshall),
    where None means there is no direct link.
    """

    def __init__(self, station_names: list[str]):
        """
        Initialize a graph with one station per name and no links.

        Args:
            station_names: Display names, indexed in order. Need not be unique.
        """
        self._stations = [
            Station(index=i, name=name) for i, name in enumerate(station_names)
        ]
        n = len(self._stations)
        self._links: list[RailwayLink] = []
        self._matrix: list[list[float | None]] = [[None] * n for _ in range(n)]
        for i in range(n):
            self._matrix[i][i] = 0.0

    def _check_station(self, station: int) -> None:
        check_station_index(station, len(self._stations))

    def connect(self, station_a: int, station_b: int, distance_km: float) -> RailwayLink:
        """
        Add a bidirectional link between two stations.

        The link list keeps every call, including duplicates between the same
        pair. The matrix keeps the shortest distance seen for that pair.

        Raises:
            InvalidStationIndexError: if either index is not an int in range
            NegativeWeightError: if distance_km is negative, NaN or infinite
        """
        self._check_station(station_a)
        self._check_station(station_b)
        if isinstance(distance_km, bool) or not isinstance(distance_km, (int, float)):
            raise NegativeWeightError(distance_km)
        if not (distance_km >= 0 and math.isfinite(distance_km)):
            raise NegativeWeightError(distance_km)

        link = RailwayLink(station_a, station_b, float(distance_km))

        # Self-loops never touch the zero diagonal
        if station_a == station_b:
            logger.debug("Self-loop on station %d kept in link list only", station_a)
            self._links.append(link)
            return link

        current = self._matrix[station_a][station_b]
        if current is not None:
            logger.debug(
                "Duplicate link %d-%d (%.1f km, existing %.1f km)",
                station_a,
                station_b,
                link.distance_km,
                current,
            )
        if current is None or link.distance_km < current:
            self._matrix[station_a][station_b] = link.distance_km
            self._matrix[station_b][station_a] = link.distance_km
        self._links.append(link)
        return link

    @property
    def num_stations(self) -> int:
        return len(self._stations)

    @property
    def stations(self) -> list[Station]:
        """Get list of all stations in index order."""
        return list(self._stations)

    @property
    def links(self) -> list[RailwayLink]:
        """Get all links in insertion order."""
        return list(self._links)

    def station_name(self, station: int) -> str:
        """Get the display name of a station."""
        self._check_station(station)
        return self._stations[station].name

    def distance(self, station_a: int, station_b: int) -> float | None:
        """Get the direct link distance between two stations, or None."""
        self._check_station(station_a)
        self._check_station(station_b)
        return self._matrix[station_a][station_b]

    def matrix(self) -> list[list[float | None]]:
        """Return a copy of the direct distance matrix."""
        return [list(row) for row in self._matrix]

    def to_networkx(self) -> nx.MultiGraph:
        """
        Export the network as a networkx MultiGraph.

        Nodes are station indices with a ``name`` attribute; each link becomes
        one edge with ``weight`` set to its distance.
        """
        graph = nx.MultiGraph()
        for station in self._stations:
            graph.add_node(station.index, name=station.name)
        for link in self._links:
            graph.add_edge(link.origin, link.destination, weight=link.distance_km)
        return graph

    def __len__(self) -> int:
        """Return number of stations."""
        return len(self._stations)
