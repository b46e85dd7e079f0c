"""Kruskal's algorithm for the minimal railway spanning tree."""

import logging
from dataclasses import dataclass, field

from src.network.graph import RailwayGraph, RailwayLink

from .union_find import StationUnionFind

logger = logging.getLogger(__name__)


@dataclass
class SpanningTreeResult:
    """Result of a minimum spanning tree computation."""

    links: list[RailwayLink] = field(default_factory=list)  # In acceptance order
    total_distance: float = 0.0  # Sum of accepted link distances in km
    num_stations: int = 0
    num_components: int = 0  # Connected components of the input network

    @property
    def is_spanning_tree(self) -> bool:
        """True when the network is connected and the result spans it."""
        return self.num_components <= 1


def build_mst(graph: RailwayGraph) -> SpanningTreeResult:
    """
    Build a minimum spanning forest of the railway network.

    Links are considered in ascending distance order; ties keep their
    insertion order. A link is accepted when its endpoints are not yet
    connected. A disconnected network yields a forest of N - k links for k
    components, without error.

    Args:
        graph: RailwayGraph instance (left untouched)

    Returns:
        SpanningTreeResult with accepted links and total distance
    """
    ordered = sorted(graph.links, key=lambda link: link.distance_km)
    groups = StationUnionFind(graph.num_stations)
    result = SpanningTreeResult(num_stations=graph.num_stations)

    for link in ordered:
        if groups.find(link.origin) == groups.find(link.destination):
            logger.debug(
                "Skip %d-%d (%.1f km): would close a cycle",
                link.origin,
                link.destination,
                link.distance_km,
            )
            continue

        groups.union(link.origin, link.destination)
        result.links.append(link)
        result.total_distance += link.distance_km
        logger.debug(
            "Accept %d-%d (%.1f km)", link.origin, link.destination, link.distance_km
        )

    result.num_components = groups.component_count
    logger.info(
        "Spanning forest: %d links, %.1f km, %d component(s)",
        len(result.links),
        result.total_distance,
        result.num_components,
    )
    return result
