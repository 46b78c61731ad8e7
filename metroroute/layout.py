"""Station coordinates and the geometry of the metro map view."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, Union

Color = Tuple[int, int, int]

BLACK: Color = (0, 0, 0)
MARGIN = 50.0
STATION_RADIUS = 6.0
HOVER_PADDING = 5.0

_COLORS = {
    "Blue": (0, 0, 255),
    "Red": (255, 0, 0),
    "Yellow": (255, 255, 0),
    "Green": (0, 255, 0),
    "Violet": (148, 0, 211),
    "Magenta": (255, 0, 255),
    "Orange": (255, 140, 0),
    "Pink": (255, 105, 180),
}

_LEADING_FLOAT = re.compile(r"[ \t\n\v\f\r]*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def color_from_name(name: str) -> Color:
    """Return the RGB colour of a metro line; unknown names are black."""
    return _COLORS.get(name, BLACK)


@dataclass(frozen=True)
class Station:
    """A station with map coordinates and the colour of its line."""

    name: str
    x: float
    y: float
    color: Color = BLACK


def _parse_coordinate(text: str) -> float:
    match = _LEADING_FLOAT.match(text)
    if match is None:
        raise ValueError(f"invalid coordinate: {text!r}")
    return float(match.group(1))


def parse_stations(lines: Iterable[str]) -> List[Station]:
    """Parse ``name,x,y,colour`` rows; the first line is a header and is skipped."""
    rows = iter(lines)
    next(rows, None)
    stations = []
    for raw in rows:
        fields = raw.rstrip("\r\n").split(",")
        if len(fields) < 3:
            raise ValueError(f"incomplete station row: {raw!r}")
        name, x_text, y_text = fields[:3]
        color_name = fields[3] if len(fields) > 3 else ""
        stations.append(
            Station(name, _parse_coordinate(x_text), _parse_coordinate(y_text), color_from_name(color_name))
        )
    return stations


def load_stations(path: Union[str, os.PathLike]) -> List[Station]:
    """Read station coordinates from a CSV file."""
    with open(path, encoding="utf-8") as handle:
        return parse_stations(handle)


@dataclass(frozen=True)
class MapLayout:
    """Maps station coordinates onto window pixels, y axis pointing up."""

    min_x: float
    min_y: float
    scale_x: float
    scale_y: float
    height: float
    bottom_margin: float = MARGIN

    @classmethod
    def fit(
        cls,
        stations: Iterable[Station],
        width: float,
        height: float,
        bottom_margin: float = MARGIN,
    ) -> "MapLayout":
        """Scale the stations' bounding box to fill the window inside its margins.

        The vertical span is the height less the larger of ``bottom_margin``
        and the two side margins together.
        """
        stations = list(stations)
        if not stations:
            raise ValueError("no stations to lay out")
        xs = [station.x for station in stations]
        ys = [station.y for station in stations]
        span_x = max(xs) - min(xs)
        span_y = max(ys) - min(ys)
        if span_x == 0 or span_y == 0:
            raise ValueError("stations do not span an area")
        scale_x = (width - 2 * MARGIN) / span_x
        scale_y = (height - max(bottom_margin, 2 * MARGIN)) / span_y
        return cls(min(xs), min(ys), scale_x, scale_y, float(height), float(bottom_margin))

    def to_screen(self, x: float, y: float) -> Tuple[float, float]:
        """Return the pixel position of a map coordinate."""
        return (
            MARGIN + (x - self.min_x) * self.scale_x,
            self.height - self.bottom_margin - (y - self.min_y) * self.scale_y,
        )

    def station_at(
        self,
        stations: Sequence[Station],
        px: float,
        py: float,
        radius: float = STATION_RADIUS,
    ) -> Optional[int]:
        """Return the index of the first station whose dot covers the pixel, if any.

        A dot occupies the square of side ``2 * radius`` whose top-left corner
        is the station's screen position.
        """
        for index, station in enumerate(stations):
            left, top = self.to_screen(station.x, station.y)
            if left <= px < left + 2 * radius and top <= py < top + 2 * radius:
                return index
        return None


def hover_box(
    dot_x: float,
    dot_y: float,
    radius: float,
    text_width: float,
    text_height: float,
    window_width: float,
    window_height: float,
    padding: float = HOVER_PADDING,
) -> Tuple[float, float, float, float]:
    """Place a label box beside a dot, keeping it inside the window.

    Returns ``(x, y, width, height)``. The box sits right of the dot and is
    moved left when it overflows the right edge, below when it overflows the
    top and above when it overflows the bottom.
    """
    box_width = text_width + 2 * padding
    box_height = text_height + 2 * padding
    box_x = dot_x + radius + padding
    box_y = dot_y - box_height / 2.0

    if box_x + box_width > window_width:
        box_x = dot_x - radius - box_width - padding

    if box_y < 0:
        box_y = dot_y + radius + padding
    elif box_y + box_height > window_height:
        box_y = dot_y - radius - box_height - padding

    return box_x, box_y, box_width, box_height