"""Subway routing with transfer-aware shortest paths."""

from __future__ import annotations

import heapq
import logging
import math
from dataclasses import dataclass, field
from typing import Optional

from .config import TRANSFER_COST
from .graph import TransitGraph
from .stations import build_sample_graph, find_station

logger = logging.getLogger(__name__)

# Cost reported for a destination that cannot be reached
UNREACHABLE = -1


@dataclass
class RouteSegment:
    """A stretch of a route ridden on one line."""
    line: str
    from_station: str
    to_station: str
    stops: list[str]
    cost: int

    def __str__(self):
        return f"Take {self.line} from {self.from_station} to {self.to_station} ({len(self.stops)-1} stops, cost {self.cost})"


@dataclass
class Route:
    """Result of a planning query.

    ``path`` holds (station, line used to arrive) pairs from source to
    destination. The source's line is the empty string. An unreachable
    destination gives ``cost == UNREACHABLE`` and an empty path.
    """
    cost: int
    path: list[tuple[str, str]] = field(default_factory=list)
    segments: list[RouteSegment] = field(default_factory=list)

    @property
    def reachable(self) -> bool:
        return self.cost != UNREACHABLE

    @property
    def stations(self) -> list[str]:
        return [station for station, _ in self.path]

    @property
    def transfer_count(self) -> int:
        lines = [line for _, line in self.path[1:]]
        return sum(1 for prev, cur in zip(lines, lines[1:]) if prev != cur)


def plan(graph: TransitGraph, source: str, destination: str, transfer_cost: int) -> Route:
    """Find the cheapest route from source to destination.

    Dijkstra over stations where the frontier also remembers the line used
    to arrive. Taking an edge on a different line than the one we arrived
    on adds ``transfer_cost``. Relies on all costs being non-negative.
    """
    logger.debug("Planning %s -> %s (transfer cost %s)", source, destination, transfer_cost)

    best: dict[str, float] = {station: math.inf for station in graph.adjacency}
    best[source] = 0
    # station -> (previous station, line used to get here)
    parent: dict[str, tuple[str, str]] = {source: ("", "")}

    # Frontier entries: (cost, station, line used to arrive)
    pq: list[tuple[int, str, str]] = [(0, source, "")]

    while pq:
        cost, current, current_line = heapq.heappop(pq)

        if cost > best.get(current, math.inf):
            continue
        if current == destination:
            break

        for edge in graph.neighbors(current):
            extra = transfer_cost if current_line and current_line != edge.line else 0
            new_cost = cost + edge.cost + extra
            if new_cost < best.get(edge.destination, math.inf):
                best[edge.destination] = new_cost
                parent[edge.destination] = (current, edge.line)
                heapq.heappush(pq, (new_cost, edge.destination, edge.line))

    total = best.get(destination, math.inf)
    if total == math.inf:
        logger.debug("No path from %s to %s", source, destination)
        return Route(cost=UNREACHABLE)

    path = []
    current = destination
    while current != source:
        previous, line = parent[current]
        path.append((current, line))
        current = previous
    path.append((source, ""))
    path.reverse()

    route = Route(cost=total, path=path, segments=_build_segments(graph, path))
    logger.debug("Route %s -> %s costs %s with %d transfer(s)",
                 source, destination, total, route.transfer_count)
    return route


def _build_segments(graph: TransitGraph, path: list[tuple[str, str]]) -> list[RouteSegment]:
    """Split a path into runs ridden on the same line."""
    segments = []
    if len(path) < 2:
        return segments

    current_line = path[1][1]
    segment_start = 0

    for i in range(2, len(path)):
        line = path[i][1]
        if line != current_line:
            segments.append(_segment(graph, path, segment_start, i, current_line))
            segment_start = i - 1  # transfer station starts the next segment
            current_line = line

    segments.append(_segment(graph, path, segment_start, len(path), current_line))
    return segments


def _segment(graph: TransitGraph, path: list[tuple[str, str]], start: int, end: int, line: str) -> RouteSegment:
    stops = [path[j][0] for j in range(start, end)]
    cost = 0
    for a, b in zip(stops, stops[1:]):
        edge = graph.find_edge(a, b, line)
        cost += edge.cost if edge else 0
    return RouteSegment(
        line=line,
        from_station=stops[0],
        to_station=stops[-1],
        stops=stops,
        cost=cost,
    )


@dataclass
class RoutePlanner:
    """Planner bound to one read-only graph and a default transfer penalty."""
    graph: TransitGraph
    transfer_cost: int = TRANSFER_COST

    def plan(self, source: str, destination: str, transfer_cost: Optional[int] = None) -> Route:
        if transfer_cost is None:
            transfer_cost = self.transfer_cost
        return plan(self.graph, source, destination, transfer_cost)


# Singleton instance over the sample map
planner = RoutePlanner(build_sample_graph(), TRANSFER_COST)


def find_route(from_name: str, to_name: str, transfer_cost: Optional[int] = None) -> Optional[Route]:
    """Find a route between two stations by name.

    Returns None when either name does not match a station.
    """
    from_station = find_station(from_name, planner.graph)
    to_station = find_station(to_name, planner.graph)

    if not from_station:
        return None
    if not to_station:
        return None

    return planner.plan(from_station, to_station, transfer_cost)
