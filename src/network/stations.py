"""Built-in Southwest Nigeria railway dataset."""

from .graph import RailwayGraph

SOUTHWEST_STATIONS = [
    "Lagos_Central",
    "Ibadan_Main",
    "Abeokuta_Junction",
    "Ilorin_Terminal",
    "Ogbomoso_Station",
    "Oshogbo_Hub",
    "Akure_Depot",
    "Ado_Ekiti_Stop",
    "Ikeja_Connect",
    "Sagamu_Point",
    "Oyo_Classic",
    "Ile_Ife_Heritage",
]

# (station_a, station_b, distance_km)
SOUTHWEST_LINKS = [
    # Lagos (major hub)
    (0, 2, 64.5),
    (0, 8, 23.7),
    (0, 9, 46.2),
    (0, 1, 128.2),
    # Ibadan (second hub)
    (1, 4, 91.3),
    (1, 10, 54.8),
    (1, 5, 89.7),
    (1, 2, 74.1),
    # Abeokuta
    (2, 8, 67.4),
    (2, 9, 52.9),
    # Northern
    (4, 3, 83.6),
    (4, 5, 47.8),
    (5, 6, 114.2),
    (5, 11, 76.3),
    # Eastern
    (6, 7, 52.1),
    (11, 7, 89.4),
    # Strategic
    (10, 4, 38.5),
    (8, 9, 34.7),
    (3, 5, 97.2),
]


def build_southwest_network() -> RailwayGraph:
    """Build the 12-station Southwest Nigeria network."""
    graph = RailwayGraph(SOUTHWEST_STATIONS)
    for station_a, station_b, distance_km in SOUTHWEST_LINKS:
        graph.connect(station_a, station_b, distance_km)
    return graph
