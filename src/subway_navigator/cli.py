#!/usr/bin/env python3
"""Command-line interface for the subway navigator."""

import logging
import sys
from typing import Optional

from .config import LOG_LEVEL, USE_COLOR
from .display import format_map, format_route
from .routing import planner
from .stations import find_station, list_stations


def print_banner():
    """Print the welcome banner."""
    print("""
╔═══════════════════════════════════════════════════════════╗
║           Welcome to Smart Subway Navigator - NYC         ║
║                                                           ║
║  Pick a start and an end station by number or by name.   ║
╚═══════════════════════════════════════════════════════════╝
""")


def resolve_choice(choice: str, station_list: list[str]) -> Optional[str]:
    """Turn a menu number or a station name into a station name."""
    choice = choice.strip()
    if choice.isdigit():
        index = int(choice)
        if 1 <= index <= len(station_list):
            return station_list[index - 1]
        return None
    if not choice:
        return None
    return find_station(choice, planner.graph)


def main(show_map: bool = True, color: bool = USE_COLOR) -> int:
    """Run the interactive route finder. Returns the process exit code."""
    logging.basicConfig(level=LOG_LEVEL)
    graph = planner.graph

    if show_map:
        print(format_map(graph, color=color))

    station_list = list_stations(graph)

    print_banner()
    print("Available stations:")
    for i, station in enumerate(station_list, 1):
        print(f"{i}. {station}")

    try:
        src_input = input("\nEnter source station number: ")
        dest_input = input("Enter destination station number: ")
    except (KeyboardInterrupt, EOFError):
        print("\nGoodbye! Safe travels! 🚇")
        return 1

    src = resolve_choice(src_input, station_list)
    dest = resolve_choice(dest_input, station_list)

    if not src or not dest:
        print("Invalid station number(s) entered.")
        return 1

    route = planner.plan(src, dest)
    print(format_route(route, src, dest, color=color))
    return 0


if __name__ == "__main__":
    sys.exit(main())
