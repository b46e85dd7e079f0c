"""Pathfinding module for railway network optimization."""

from .floyd_warshall import ShortestRouteTable, all_pairs_shortest_paths
from .kruskal import SpanningTreeResult, build_mst
from .union_find import StationUnionFind

__all__ = [
    "StationUnionFind",
    "SpanningTreeResult",
    "build_mst",
    "ShortestRouteTable",
    "all_pairs_shortest_paths",
]
