"""Sample NYC subway map and station lookup."""

from __future__ import annotations

from typing import Optional

from .graph import TransitGraph

# Format: station_a, station_b, cost, line (all connections run both ways)
SAMPLE_EDGES = [
    # Line 1
    ("Times Sq", "42nd St", 4, "1"),
    ("42nd St", "34th St", 5, "1"),
    ("34th St", "Penn Station", 6, "1"),

    # Line 2
    ("42nd St", "Grand Central", 3, "2"),
    ("Grand Central", "14th St", 6, "2"),
    ("14th St", "Wall St", 7, "2"),

    # Line 3
    ("34th St", "Union Sq", 4, "3"),
    ("Union Sq", "Houston St", 7, "3"),
    ("Houston St", "Canal St", 5, "3"),

    # Grand Central and Union Sq are treated as a walking interchange
    ("Grand Central", "Union Sq", 4, "Interchange"),
]

# Common alternate names -> station name
STATION_ALIASES = {
    "times square": "Times Sq",
    "times sq-42nd st": "Times Sq",
    "grand central terminal": "Grand Central",
    "gct": "Grand Central",
    "penn": "Penn Station",
    "penn station": "Penn Station",
    "union square": "Union Sq",
    "wall street": "Wall St",
    "houston street": "Houston St",
    "canal street": "Canal St",
}


def build_sample_graph(graph: Optional[TransitGraph] = None) -> TransitGraph:
    """Add the sample map to a graph (a new one if none is given)."""
    if graph is None:
        graph = TransitGraph()
    for station_a, station_b, cost, line in SAMPLE_EDGES:
        graph.add_bidirectional_edge(station_a, station_b, cost, line)
    return graph


def _default_graph() -> TransitGraph:
    from .routing import planner
    return planner.graph


def list_stations(graph: TransitGraph) -> list[str]:
    """All stations sorted by name, the order used for numbered selection."""
    return sorted(graph.stations())


def find_station(query: str, graph: Optional[TransitGraph] = None) -> Optional[str]:
    """Find a station by name (fuzzy match)."""
    if graph is None:
        graph = _default_graph()

    query_lower = query.lower().strip()
    if not query_lower:
        return None

    name_index = {name.lower(): name for name in graph.stations()}

    # Check aliases first
    alias = STATION_ALIASES.get(query_lower)
    if alias and alias in graph:
        return alias

    # Exact match
    if query_lower in name_index:
        return name_index[query_lower]

    # Partial match - prefer shorter station names (more specific)
    matches = []
    for name_lower, name in name_index.items():
        if query_lower in name_lower or name_lower in query_lower:
            matches.append((len(name_lower), name))

    if matches:
        matches.sort()
        return matches[0][1]

    return None


def find_stations_by_line(line: str, graph: Optional[TransitGraph] = None) -> list[str]:
    """Find all stations touched by a given line."""
    if graph is None:
        graph = _default_graph()

    found = set()
    for station, edge in graph.edges():
        if edge.line.lower() == line.lower():
            found.add(station)
            found.add(edge.destination)
    return sorted(found)
