"""
Southwest Nigeria Railway Network Optimizer - Main entry point.

Usage:
    python -m src.main
    python -m src.main --section mst
    python -m src.main --route 0 7
    python -m src.main --format json
    python -m src.main --help
"""

import argparse
import json
import logging
import sys

from src import report
from src.network import RailwayGraph, RailwayNetworkError, build_southwest_network
from src.pathfinding import all_pairs_shortest_paths, build_mst

BANNER = "================================================"
SECTIONS = ["all", "stations", "mst", "routes"]

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Southwest Nigeria Railway Network Optimizer - "
        "minimal spanning network and shortest routes between stations"
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--section",
        choices=SECTIONS,
        default="all",
        help="Report section to print in text mode (default: all)",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=1,
        help="Decimal places in the distance table (default: 1)",
    )
    parser.add_argument(
        "--route",
        nargs=2,
        type=int,
        metavar=("FROM", "TO"),
        help="Also print the shortest route between two station indices",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log algorithm steps to stderr",
    )
    return parser


def render_text(
    graph: RailwayGraph, section: str, precision: int, route: list[int] | None
) -> str:
    """Build the full text report for the requested section."""
    blocks = [
        BANNER,
        "   SOUTHWEST NIGERIA RAILWAY NETWORK OPTIMIZER  ",
        BANNER,
    ]

    if section in ("all", "stations"):
        blocks.append(report.format_station_list(graph))

    if section in ("all", "mst"):
        mst = build_mst(graph)
        blocks.append("\n" + report.format_mst(graph, mst))

    routes = None
    if section in ("all", "routes") or route:
        routes = all_pairs_shortest_paths(graph)
    if section in ("all", "routes"):
        blocks.append("\n=== CALCULATING SHORTEST ROUTES BETWEEN ALL STATIONS ===")
        blocks.append("\n" + report.format_distance_table(graph, routes, precision))

    if route:
        blocks.append(
            "\n" + report.format_route(graph, routes, route[0], route[1], precision)
        )

    blocks.append("\n" + BANNER)
    blocks.append("   RAILWAY NETWORK OPTIMIZATION COMPLETED!      ")
    blocks.append(BANNER)
    return "\n".join(blocks)


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.precision < 0:
        parser.error("--precision must be non-negative")

    graph = build_southwest_network()
    logger.info(
        "Loaded %d stations and %d links", graph.num_stations, len(graph.links)
    )

    if args.route:
        for station in args.route:
            if not 0 <= station < graph.num_stations:
                print(
                    f"Error: Station index {station} out of range "
                    f"(0-{graph.num_stations - 1})",
                    file=sys.stderr,
                )
                sys.exit(1)

    try:
        if args.format == "json":
            mst = build_mst(graph)
            routes = all_pairs_shortest_paths(graph)
            data = report.to_dict(graph, mst, routes)
            if args.route:
                data["route"] = routes.route(args.route[0], args.route[1])
            print(json.dumps(data, indent=2))
        else:
            print(render_text(graph, args.section, args.precision, args.route))
    except RailwayNetworkError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
