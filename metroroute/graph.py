"""Metro network graph with shortest-distance and fewest-interchange routing."""

from __future__ import annotations

import heapq
import itertools
import math
import os
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

_WHITESPACE = " \t\n\v\f\r"
_LEADING_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

STATION_NOT_FOUND = "Error: One or both stations not found!"
NO_PATH = "Error: No path found!"
RECONSTRUCTION_FAILED = "Error reconstructing path!"


class RouteError(Exception):
    """Raised when a route cannot be produced."""


class StationNotFoundError(RouteError, LookupError):
    """Raised when the source or destination is not in the network."""

    def __init__(self, message: str = STATION_NOT_FOUND) -> None:
        super().__init__(message)


class NoPathError(RouteError):
    """Raised when the destination cannot be reached from the source."""

    def __init__(self, message: str = NO_PATH) -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Connection:
    """One directed link to a neighbouring station."""

    station: str
    distance: float
    line_color: str


@dataclass(frozen=True)
class Route:
    """A route between two stations.

    ``lines[i]`` is the line used between ``path[i]`` and ``path[i + 1]``.
    """

    path: Tuple[str, ...]
    lines: Tuple[str, ...]
    total_distance: float
    total_line_changes: Optional[int] = None

    def to_json(self) -> dict:
        """Return the route as a JSON-ready dictionary."""
        result = {
            "path": list(self.path),
            "total_distance": self.total_distance,
            "lines": list(self.lines),
        }
        if self.total_line_changes is not None:
            result["total_line_changes"] = self.total_line_changes
        return result


def _parse_distance(text: str) -> float:
    match = _LEADING_NUMBER.match(text)
    return float(match.group(1)) if match else 0.0


def _trace(
    previous: Dict[str, Tuple[str, str]], source: str, destination: str
) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    path = [destination]
    lines: List[str] = []
    seen = {destination}
    current = destination
    while current != source:
        try:
            current, line = previous[current]
        except KeyError:
            raise RouteError(RECONSTRUCTION_FAILED) from None
        if current in seen:
            raise RouteError(RECONSTRUCTION_FAILED)
        seen.add(current)
        lines.append(line)
        path.append(current)
    path.reverse()
    lines.reverse()
    return tuple(path), tuple(lines)


@dataclass
class MetroGraph:
    """An undirected metro network whose edges carry a distance and a line colour."""

    adjacency: Dict[str, List[Connection]] = field(default_factory=dict)

    def add_edge(self, station1: str, station2: str, distance: float, line_color: str) -> None:
        """Link two stations both ways; blank names and self-links are ignored."""
        station1 = station1.strip(_WHITESPACE)
        station2 = station2.strip(_WHITESPACE)
        line_color = line_color.strip(_WHITESPACE)
        if not station1 or not station2 or station1 == station2:
            return
        distance = float(distance)
        self.adjacency.setdefault(station1, []).append(Connection(station2, distance, line_color))
        self.adjacency.setdefault(station2, []).append(Connection(station1, distance, line_color))

    def load_csv(self, path: Union[str, os.PathLike], skip_header: bool = True) -> None:
        """Read ``station1,station2,line,distance`` rows from a file."""
        with open(path, encoding="utf-8") as handle:
            if skip_header:
                next(handle, None)
            for raw in handle:
                fields = raw.rstrip("\n").split(",", 3)
                fields += [""] * (4 - len(fields))
                station1, station2, line_color, distance = fields
                self.add_edge(station1, station2, _parse_distance(distance), line_color)

    def stations(self) -> List[str]:
        """Return the names of all stations, sorted."""
        return sorted(self.adjacency)

    def _require(self, source: str, destination: str) -> None:
        if source not in self.adjacency or destination not in self.adjacency:
            raise StationNotFoundError()

    def shortest_path(self, source: str, destination: str) -> Route:
        """Return the route with the least total distance."""
        self._require(source, destination)
        best = {station: math.inf for station in self.adjacency}
        best[source] = 0.0
        previous: Dict[str, Tuple[str, str]] = {}
        heap: List[Tuple[float, str]] = [(0.0, source)]

        while heap:
            distance, current = heapq.heappop(heap)
            if current == destination:
                break
            for neighbour in self.adjacency[current]:
                candidate = distance + neighbour.distance
                if candidate < best[neighbour.station]:
                    best[neighbour.station] = candidate
                    previous[neighbour.station] = (current, neighbour.line_color)
                    heapq.heappush(heap, (candidate, neighbour.station))

        if destination not in previous:
            raise NoPathError()
        path, lines = _trace(previous, source, destination)
        return Route(path, lines, best[destination])

    def minimum_exchanges(self, source: str, destination: str) -> Route:
        """Return the route with the fewest line changes, then the least distance."""
        self._require(source, destination)
        order = itertools.count()
        best: Dict[str, Tuple[int, float]] = {source: (0, 0.0)}
        previous: Dict[str, Tuple[str, str]] = {}
        heap: List[Tuple[int, float, int, str, str]] = [(0, 0.0, next(order), source, "")]

        while heap:
            changes, distance, _, current, line = heapq.heappop(heap)
            if current == destination:
                break
            for neighbour in self.adjacency[current]:
                switched = bool(line) and line != neighbour.line_color
                candidate = (changes + int(switched), distance + neighbour.distance)
                known = best.get(neighbour.station)
                if known is None or candidate < known:
                    best[neighbour.station] = candidate
                    previous[neighbour.station] = (current, neighbour.line_color)
                    heapq.heappush(
                        heap,
                        (candidate[0], candidate[1], next(order), neighbour.station, neighbour.line_color),
                    )

        if destination not in best:
            raise NoPathError()
        path, lines = _trace(previous, source, destination)
        changes, distance = best[destination]
        return Route(path, lines, distance, changes)