"""Directed, line-labelled transit graph."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(frozen=True)
class Edge:
    """A directed connection to another station on one line."""
    destination: str
    cost: int
    line: str


class TransitGraph:
    """Adjacency list of stations and their outgoing edges.

    Stations are created the first time they appear as an edge endpoint.
    Costs are expected to be non-negative; nothing here checks that.
    """

    def __init__(self):
        self.adjacency: dict[str, list[Edge]] = {}  # station -> [Edge]
        self._destinations: dict[str, None] = {}  # ordered set of edge targets

    def add_edge(self, from_station: str, to_station: str, cost: int, line: str):
        """Add a single directed edge."""
        if from_station not in self.adjacency:
            self.adjacency[from_station] = []
        self.adjacency[from_station].append(Edge(to_station, cost, line))
        self._destinations.setdefault(to_station, None)

    def add_bidirectional_edge(self, station_a: str, station_b: str, cost: int, line: str):
        """Add two independent edges, a -> b and b -> a, with the same cost and line."""
        self.add_edge(station_a, station_b, cost, line)
        self.add_edge(station_b, station_a, cost, line)

    def neighbors(self, station: str) -> tuple[Edge, ...]:
        """Outgoing edges of a station (empty if it has none)."""
        return tuple(self.adjacency.get(station, ()))

    def stations(self) -> list[str]:
        """All known stations, including ones only reached as a destination."""
        names = list(self.adjacency)
        names.extend(s for s in self._destinations if s not in self.adjacency)
        return names

    def edges(self) -> Iterator[tuple[str, Edge]]:
        """Iterate over every (source, edge) pair in insertion order."""
        for station, edges in self.adjacency.items():
            for edge in edges:
                yield station, edge

    def lines(self) -> set[str]:
        """Every line label used by at least one edge."""
        return {edge.line for _, edge in self.edges()}

    def find_edge(self, from_station: str, to_station: str, line: str) -> Optional[Edge]:
        """Cheapest edge between two stations on the given line, if any."""
        matches = [
            edge for edge in self.adjacency.get(from_station, [])
            if edge.destination == to_station and edge.line == line
        ]
        if not matches:
            return None
        return min(matches, key=lambda e: e.cost)

    def __contains__(self, station: object) -> bool:
        return station in self.adjacency or station in self._destinations

    def __len__(self) -> int:
        return len(self.adjacency)
