"""Disjoint-set structure over station indices, used by Kruskal."""

from src.network.graph import check_station_index


class StationUnionFind:
    """
    Union-Find (disjoint set) with path compression and union by rank.

    Every station starts in its own set. There is no removal: the structure
    lives for a single spanning tree computation.
    """

    def __init__(self, num_stations: int):
        self.parent = list(range(num_stations))
        self.rank = [0] * num_stations
        self._components = num_stations

    def find(self, station: int) -> int:
        """
        Return the representative of the set containing ``station``.

        Intermediate parent pointers are rewritten to point at the root.

        Raises:
            InvalidStationIndexError: if station is not an int in range
        """
        check_station_index(station, len(self.parent))

        root = station
        while self.parent[root] != root:
            root = self.parent[root]

        while self.parent[station] != root:
            self.parent[station], station = root, self.parent[station]
        return root

    def union(self, station_a: int, station_b: int) -> bool:
        """
        Merge the sets containing two stations.

        The lower-rank root goes under the higher-rank one; on a tie the root
        of ``station_a`` becomes the parent and gains one rank.

        Returns:
            False if both stations were already in the same set, True otherwise
        """
        root_a = self.find(station_a)
        root_b = self.find(station_b)
        if root_a == root_b:
            return False

        if self.rank[root_a] < self.rank[root_b]:
            self.parent[root_a] = root_b
        elif self.rank[root_a] > self.rank[root_b]:
            self.parent[root_b] = root_a
        else:
            self.parent[root_b] = root_a
            self.rank[root_a] += 1
        self._components -= 1
        return True

    def connected(self, station_a: int, station_b: int) -> bool:
        """Check if two stations are in the same set."""
        return self.find(station_a) == self.find(station_b)

    @property
    def component_count(self) -> int:
        """Number of disjoint sets."""
        return self._components

    def __len__(self) -> int:
        return len(self.parent)
