"""Floyd-Warshall shortest distances between all stations."""

import logging
from dataclasses import dataclass

from src.network.graph import RailwayGraph, check_station_index

logger = logging.getLogger(__name__)


@dataclass
class ShortestRouteTable:
    """
    All-pairs shortest distances.

    ``distances[i][j]`` is None when j cannot be reached from i.
    ``next_hop[i][j]`` is the station after i on a shortest route to j.
    """

    distances: list[list[float | None]]
    next_hop: list[list[int | None]]

    @property
    def num_stations(self) -> int:
        return len(self.distances)

    def _check_station(self, station: int) -> None:
        check_station_index(station, self.num_stations)

    def distance(self, start: int, end: int) -> float | None:
        """Shortest distance between two stations, or None if unreachable."""
        self._check_station(start)
        self._check_station(end)
        return self.distances[start][end]

    def is_reachable(self, start: int, end: int) -> bool:
        return self.distance(start, end) is not None

    def route(self, start: int, end: int) -> list[int]:
        """
        Station indices along a shortest route, endpoints included.

        Returns an empty list when end is unreachable from start.
        """
        if not self.is_reachable(start, end):
            return []

        path = [start]
        current = start
        while current != end:
            current = self.next_hop[current][end]
            path.append(current)
        return path


def all_pairs_shortest_paths(graph: RailwayGraph) -> ShortestRouteTable:
    """
    Compute shortest distances between all pairs of stations.

    Works on a copy of the graph's distance matrix. O(N^3).

    Args:
        graph: RailwayGraph instance (left untouched)

    Returns:
        ShortestRouteTable with distances and next hops
    """
    dist = graph.matrix()
    n = len(dist)
    next_hop: list[list[int | None]] = [
        [j if dist[i][j] is not None else None for j in range(n)] for i in range(n)
    ]

    for transit in range(n):
        row_transit = dist[transit]
        for start in range(n):
            via_transit = dist[start][transit]
            if via_transit is None:
                continue
            row_start = dist[start]
            for end in range(n):
                leg = row_transit[end]
                if leg is None:
                    continue
                candidate = via_transit + leg
                if row_start[end] is None or candidate < row_start[end]:
                    row_start[end] = candidate
                    next_hop[start][end] = next_hop[start][transit]

    unreachable = sum(row.count(None) for row in dist)
    logger.info(
        "Shortest routes computed for %d stations (%d unreachable pairs)",
        n,
        unreachable,
    )
    return ShortestRouteTable(distances=dist, next_hop=next_hop)
