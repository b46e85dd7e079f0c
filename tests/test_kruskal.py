"""Tests for Kruskal's minimum spanning tree."""

import random

import networkx as nx
import pytest

from src.network import RailwayGraph, RailwayLink, build_southwest_network
from src.pathfinding.kruskal import build_mst
from src.pathfinding.union_find import StationUnionFind


def make_graph(num_stations, links):
    graph = RailwayGraph([f"S{i}" for i in range(num_stations)])
    for a, b, distance in links:
        graph.connect(a, b, distance)
    return graph


def random_graph(seed, num_stations=8, num_links=14):
    rng = random.Random(seed)
    links = [
        (rng.randrange(num_stations), rng.randrange(num_stations), rng.randint(1, 50))
        for _ in range(num_links)
    ]
    return make_graph(num_stations, links)


def forest_graph(mst):
    forest = nx.MultiGraph()
    forest.add_nodes_from(range(mst.num_stations))
    for link in mst.links:
        forest.add_edge(link.origin, link.destination)
    return forest


class TestBuildMST:
    """Tests for build_mst."""

    @pytest.fixture
    def square(self):
        return make_graph(4, [(0, 1, 10), (1, 2, 10), (0, 2, 5), (2, 3, 20)])

    def test_selects_cheapest_links(self, square):
        result = build_mst(square)
        assert result.links == [
            RailwayLink(0, 2, 5.0),
            RailwayLink(0, 1, 10.0),
            RailwayLink(2, 3, 20.0),
        ]
        assert result.total_distance == 35
        assert result.is_spanning_tree
        assert RailwayLink(1, 2, 10.0) not in result.links

    def test_disconnected_forest(self):
        result = build_mst(make_graph(4, [(0, 1, 5), (2, 3, 5)]))
        assert len(result.links) == 2
        assert result.total_distance == 10
        assert result.num_components == 2
        assert not result.is_spanning_tree

    def test_isolated_stations(self):
        result = build_mst(make_graph(3, []))
        assert result.links == []
        assert result.total_distance == 0
        assert result.num_components == 3

    def test_ties_keep_insertion_order(self):
        graph = make_graph(3, [(1, 2, 4), (0, 1, 4), (0, 2, 4)])
        result = build_mst(graph)
        assert result.links == [RailwayLink(1, 2, 4.0), RailwayLink(0, 1, 4.0)]

    def test_duplicate_links_and_self_loops(self):
        graph = make_graph(3, [(0, 0, 1), (0, 1, 9), (0, 1, 3), (1, 2, 2)])
        result = build_mst(graph)
        assert result.links == [RailwayLink(1, 2, 2.0), RailwayLink(0, 1, 3.0)]
        assert result.total_distance == 5

    def test_graph_left_untouched(self, square):
        links_before = square.links
        matrix_before = square.matrix()
        build_mst(square)
        assert square.links == links_before
        assert square.matrix() == matrix_before

    def test_accepted_links_join_distinct_sets(self, square):
        groups = StationUnionFind(square.num_stations)
        for link in build_mst(square).links:
            assert not groups.connected(link.origin, link.destination)
            groups.union(link.origin, link.destination)

    def test_southwest_network(self):
        graph = build_southwest_network()
        result = build_mst(graph)
        assert len(result.links) == graph.num_stations - 1
        assert result.total_distance == pytest.approx(627.9)
        assert result.links[0] == RailwayLink(0, 8, 23.7)
        distances = [link.distance_km for link in result.links]
        assert distances == sorted(distances)


class TestMSTProperties:
    """Property checks against networkx on random graphs."""

    @pytest.mark.parametrize("seed", range(10))
    def test_forest_is_acyclic(self, seed):
        result = build_mst(random_graph(seed))
        assert nx.is_forest(forest_graph(result))

    @pytest.mark.parametrize("seed", range(10))
    def test_link_count_matches_components(self, seed):
        graph = random_graph(seed)
        result = build_mst(graph)
        components = nx.number_connected_components(graph.to_networkx())
        assert result.num_components == components
        assert len(result.links) == graph.num_stations - components

    @pytest.mark.parametrize("seed", range(10))
    def test_total_is_sum_of_links(self, seed):
        result = build_mst(random_graph(seed))
        assert result.total_distance == pytest.approx(
            sum(link.distance_km for link in result.links)
        )

    @pytest.mark.parametrize("seed", range(10))
    def test_total_is_minimal(self, seed):
        graph = random_graph(seed)
        result = build_mst(graph)
        reference = nx.minimum_spanning_tree(graph.to_networkx(), weight="weight")
        expected = sum(data["weight"] for _, _, data in reference.edges(data=True))
        assert result.total_distance == pytest.approx(expected)
