"""State and interaction logic of the two-page route finder application."""

from __future__ import annotations

import enum
import math
import os
import sys
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from metroroute.graph import MetroGraph, Route, RouteError
from metroroute.layout import MapLayout, Station, parse_stations

Color = Tuple[int, int, int]
Rect = Tuple[float, float, float, float]

DEFAULT_WIDTH = 1200
DEFAULT_HEIGHT = 800
MAP_BOTTOM_MARGIN = 150.0
ROW_HEIGHT = 30.0

_APP_COLORS: Dict[str, Color] = {
    "Red": (255, 0, 0),
    "Blue": (0, 0, 255),
    "Green": (0, 255, 0),
    "Yellow": (255, 255, 0),
    "Violet": (255, 0, 255),
    "Orange": (0, 255, 255),
    "Pink": (255, 0, 255),
}
_DEFAULT_COLOR: Color = (255, 255, 255)


def app_color(name: str) -> Color:
    """Return the colour the application uses for a line; unknown names are white."""
    return _APP_COLORS.get(name, _DEFAULT_COLOR)


def format_shortest_path(path: Sequence[str], distance: float) -> str:
    """Describe a shortest route, with the distance truncated to two decimals."""
    if not path:
        return "Shortest Path: No path found"
    shown = math.trunc(distance * 100) / 100.0
    return f"Shortest Path: {' -> '.join(path)}\nDistance: {shown:.6f} km"


def format_min_exchanges(path: Sequence[str], changes: Optional[int]) -> str:
    """Describe a fewest-interchange route; ``None`` or a negative count means no route."""
    if changes is None or changes < 0:
        return "Min Exchanges: No path found"
    return f"Min Exchanges: {changes} exchanges\nPath: {' -> '.join(path)}"


def _inside(rect: Rect, x: float, y: float) -> bool:
    left, top, width, height = rect
    return left <= x < left + width and top <= y < top + height


class Page(enum.Enum):
    """The page the application is showing."""

    WELCOME = "welcome"
    MAP = "map"


@dataclass
class Dropdown:
    """A button that opens a list of station names to pick from."""

    placeholder: str
    items: Tuple[str, ...]
    x: float
    y: float
    list_top: float
    width: float = 300.0
    height: float = 30.0
    row_height: float = ROW_HEIGHT
    is_open: bool = False
    selected: Optional[str] = None

    @property
    def label(self) -> str:
        """Text shown on the button."""
        return self.selected if self.selected is not None else self.placeholder

    @property
    def bounds(self) -> Rect:
        """The button rectangle as ``(x, y, width, height)``."""
        return (self.x, self.y, self.width, self.height)

    def item_bounds(self, index: int) -> Rect:
        """The rectangle of one list row."""
        return (self.x, self.list_top + index * self.row_height, self.width, self.row_height)

    def toggle(self) -> None:
        """Open the list if closed, close it if open."""
        self.is_open = not self.is_open

    def item_at(self, x: float, y: float) -> Optional[int]:
        """Return the index of the open list's row under the point, if any."""
        if not self.is_open:
            return None
        for index in range(len(self.items)):
            if _inside(self.item_bounds(index), x, y):
                return index
        return None

    def _button_hit(self, x: float, y: float) -> bool:
        return _inside(self.bounds, x, y)


def _color_field(row: str) -> str:
    fields = row.rstrip("\r\n").split(",")
    return fields[3] if len(fields) > 3 else ""


def _load_stations(path: Union[str, os.PathLike]) -> List[Station]:
    with open(path, encoding="utf-8") as handle:
        rows = handle.read().splitlines()
    stations = parse_stations(rows)
    return [
        replace(station, color=app_color(_color_field(row)))
        for station, row in zip(stations, rows[1:])
    ]


class MetroApp:
    """Welcome page with station pickers, and a map page showing the found routes."""

    def __init__(
        self,
        graph: MetroGraph,
        stations: Iterable[Station],
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
    ) -> None:
        self.graph = graph
        self.stations: List[Station] = list(stations)
        self.station_index: Dict[str, Station] = {s.name: s for s in self.stations}
        self.width = width
        self.height = height
        self.page = Page.WELCOME

        names = tuple(station.name for station in self.stations)
        self.source = Dropdown("Select Source Station", names, 100.0, 230.0, 270.0)
        self.destination = Dropdown("Select Destination Station", names, 100.0, 310.0, 350.0)
        self.search_button: Rect = (100.0, 370.0, 150.0, 40.0)
        self.back_button: Rect = (width - 170.0, height - 60.0, 150.0, 40.0)

        self.layout: Optional[MapLayout] = None
        self.shortest: Optional[Route] = None
        self.exchanges: Optional[Route] = None
        self.hovered: Optional[int] = None

    @classmethod
    def from_files(
        cls,
        connections_path: Union[str, os.PathLike],
        stations_path: Union[str, os.PathLike],
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
    ) -> "MetroApp":
        """Build the application from a connections file and a coordinates file."""
        graph = MetroGraph()
        try:
            graph.load_csv(connections_path, skip_header=False)
        except OSError:
            print("Error opening connection file!", file=sys.stderr)
        try:
            stations = _load_stations(stations_path)
        except OSError:
            stations = []
        return cls(graph, stations, width, height)

    @property
    def shortest_summary(self) -> str:
        """Text describing the shortest route."""
        if self.shortest is None:
            return format_shortest_path((), math.inf)
        return format_shortest_path(self.shortest.path, self.shortest.total_distance)

    @property
    def exchanges_summary(self) -> str:
        """Text describing the fewest-interchange route."""
        if self.exchanges is None:
            return format_min_exchanges((), None)
        return format_min_exchanges(self.exchanges.path, self.exchanges.total_line_changes)

    def click(self, x: float, y: float) -> None:
        """Handle a left click at a window position."""
        if self.page is Page.MAP:
            if _inside(self.back_button, x, y):
                self.page = Page.WELCOME
                self.hovered = None
            return

        if self.source._button_hit(x, y):
            self.source.toggle()
            self.destination.is_open = False
        elif self.destination._button_hit(x, y):
            self.destination.toggle()
            self.source.is_open = False
        elif self.source.is_open:
            self._pick(self.source, x, y)
        elif self.destination.is_open:
            self._pick(self.destination, x, y)
        elif _inside(self.search_button, x, y):
            self.search()
        else:
            self.source.is_open = False
            self.destination.is_open = False

    def _pick(self, dropdown: Dropdown, x: float, y: float) -> None:
        index = dropdown.item_at(x, y)
        if index is not None:
            dropdown.selected = self.stations[index].name
            dropdown.is_open = False

    def hover(self, x: float, y: float) -> Optional[int]:
        """Track the pointer on the map page; return the hovered station's index."""
        if self.page is not Page.MAP or self.layout is None:
            return None
        self.hovered = self.layout.station_at(self.stations, x, y)
        return self.hovered

    def search(self) -> bool:
        """Find both routes for the selected stations and show the map.

        Returns whether the map page was opened.
        """
        source = self.source.selected
        destination = self.destination.selected
        if not source or not destination:
            return False
        if source not in self.station_index or destination not in self.station_index:
            return False

        try:
            self.shortest = self.graph.shortest_path(source, destination)
        except RouteError:
            self.shortest = None
        try:
            self.exchanges = self.graph.minimum_exchanges(source, destination)
        except RouteError:
            self.exchanges = None

        self.layout = MapLayout.fit(self.stations, self.width, self.height, MAP_BOTTOM_MARGIN)
        self.hovered = None
        self.page = Page.MAP
        return True