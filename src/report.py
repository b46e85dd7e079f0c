"""Console and JSON rendering of railway network results."""

from src.network.graph import RailwayGraph
from src.pathfinding.floyd_warshall import ShortestRouteTable
from src.pathfinding.kruskal import SpanningTreeResult

UNREACHABLE = "INF"
LABEL_WIDTH = 15
COLUMN_WIDTH = 12


def format_distance(distance: float | None, precision: int = 1) -> str:
    """Format a distance in km, using the INF marker when unreachable."""
    if distance is None:
        return UNREACHABLE
    return f"{distance:.{precision}f}"


def format_station_list(graph: RailwayGraph) -> str:
    lines = ["SOUTHWEST NIGERIA RAILWAY STATIONS:"]
    lines.extend(f"{station.index}: {station.name}" for station in graph.stations)
    return "\n".join(lines)


def format_mst(graph: RailwayGraph, mst: SpanningTreeResult) -> str:
    """
    Render accepted spanning tree links and the total length.

    Example:
        "Railway Track: Lagos_Central <--> Ikeja_Connect | Distance: 23.7 km"
    """
    lines = ["=== BUILDING OPTIMAL RAILWAY NETWORK (MST) ==="]
    for link in mst.links:
        lines.append(
            f"Railway Track: {graph.station_name(link.origin)} <--> "
            f"{graph.station_name(link.destination)} | Distance: {link.distance_km:g} km"
        )
    lines.append("")
    lines.append(f"Total Railway Network Length: {mst.total_distance:g} km")
    if not mst.is_spanning_tree:
        lines.append(f"Network is split into {mst.num_components} components")
    return "\n".join(lines)


def format_distance_table(
    graph: RailwayGraph, routes: ShortestRouteTable, precision: int = 1
) -> str:
    """
    Render the shortest distance table with stations as rows and columns.

    Column headers keep the first 10 characters of each name, row labels
    the first 13.
    """
    n = graph.num_stations
    header = "FROM \\ TO".rjust(LABEL_WIDTH) + "".join(
        graph.station_name(i)[:10].rjust(COLUMN_WIDTH) for i in range(n)
    )
    lines = [
        "SHORTEST DISTANCES BETWEEN NIGERIAN RAILWAY STATIONS:",
        header,
        "-" * (LABEL_WIDTH + COLUMN_WIDTH * n),
    ]
    for start in range(n):
        row = graph.station_name(start)[:13].rjust(LABEL_WIDTH)
        row += "".join(
            format_distance(routes.distance(start, end), precision).rjust(COLUMN_WIDTH)
            for end in range(n)
        )
        lines.append(row)
    return "\n".join(lines)


def format_route(
    graph: RailwayGraph,
    routes: ShortestRouteTable,
    start: int,
    end: int,
    precision: int = 1,
) -> str:
    """Render one shortest route as station names joined by arrows."""
    path = routes.route(start, end)
    origin = graph.station_name(start)
    destination = graph.station_name(end)
    if not path:
        return f"No route from {origin} to {destination}"
    stops = " -> ".join(graph.station_name(station) for station in path)
    return f"{stops} | Distance: {format_distance(routes.distance(start, end), precision)} km"


def to_dict(
    graph: RailwayGraph, mst: SpanningTreeResult, routes: ShortestRouteTable
) -> dict:
    """Structured rendering of all results; unreachable distances are None."""
    return {
        "stations": [
            {"index": station.index, "name": station.name} for station in graph.stations
        ],
        "mst": {
            "links": [
                {
                    "origin": link.origin,
                    "destination": link.destination,
                    "distance_km": link.distance_km,
                }
                for link in mst.links
            ],
            "total_distance_km": round(mst.total_distance, 6),
            "num_components": mst.num_components,
            "is_spanning_tree": mst.is_spanning_tree,
        },
        "shortest_distances": [list(row) for row in routes.distances],
    }
