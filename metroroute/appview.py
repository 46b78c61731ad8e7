"""Window for the route finder: station pickers, then a map of the found routes."""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from metroroute.app import MetroApp, Page, app_color  # noqa: E402
from metroroute.layout import HOVER_PADDING, STATION_RADIUS, hover_box  # noqa: E402

Color = Tuple[int, int, int]
Point = Tuple[float, float]
Segment = Tuple[Point, Point, Color]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)
RED: Color = (255, 0, 0)
GREEN: Color = (0, 255, 0)
BLUE: Color = (0, 0, 255)
HOVER_FILL = (255, 255, 255, 200)
TITLE = "Delhi Metro App"
WELCOME = "Welcome to Delhi Metro App!"

DEFAULT_CONNECTIONS = "Delhi_Metro_Lines.csv"
DEFAULT_STATIONS = "metro_coordinates.csv"
DEFAULT_FONT = "fonts/OpenSans-Regular.ttf"
DEFAULT_BOLD_FONT = "fonts/OpenSans-Bold.ttf"

FontPath = Optional[Union[str, os.PathLike]]


def _load_font(path: FontPath, size: int, message: str) -> "pygame.font.Font":
    try:
        return pygame.font.Font(path, size)
    except (OSError, FileNotFoundError):
        print(message, file=sys.stderr)
        return pygame.font.Font(None, size)


@dataclass
class _Fonts:
    title: "pygame.font.Font"
    label: "pygame.font.Font"
    summary: "pygame.font.Font"
    button: "pygame.font.Font"
    hover: "pygame.font.Font"


@dataclass
class AppView:
    """Draws a :class:`MetroApp` with pygame and feeds it mouse events."""

    app: MetroApp
    font_path: FontPath = None
    bold_font_path: FontPath = None
    _fonts: Optional[_Fonts] = field(default=None, init=False, repr=False)

    def segments(self) -> List[Segment]:
        """Screen segments of every connection between stations with coordinates.

        Each connection appears once per direction, coloured by its line.
        Empty until a search has laid out the map.
        """
        layout = self.app.layout
        if layout is None:
            return []
        known = self.app.station_index
        result: List[Segment] = []
        for name, connections in self.app.graph.adjacency.items():
            first = known.get(name)
            if first is None:
                continue
            start = layout.to_screen(first.x, first.y)
            for connection in connections:
                second = known.get(connection.station)
                if second is None:
                    continue
                end = layout.to_screen(second.x, second.y)
                result.append((start, end, app_color(connection.line_color)))
        return result

    def path_segments(self) -> List[Segment]:
        """Red screen segments along the shortest route found by the last search."""
        layout = self.app.layout
        route = self.app.shortest
        if layout is None or route is None:
            return []
        known = self.app.station_index
        result: List[Segment] = []
        for here, there in zip(route.path, route.path[1:]):
            if here in known and there in known:
                a, b = known[here], known[there]
                result.append((layout.to_screen(a.x, a.y), layout.to_screen(b.x, b.y), RED))
        return result

    def _text(self, surface, font, text: str, position: Point, color: Color = BLACK) -> None:
        x, y = position
        for line in text.split("\n"):
            surface.blit(font.render(line, True, color), (round(x), round(y)))
            y += font.get_linesize()

    def _button(self, surface, rect, fill: Color, caption: str) -> None:
        x, y, width, height = rect
        pygame.draw.rect(surface, fill, pygame.Rect(round(x), round(y), round(width), round(height)))
        label = self.fonts.button.render(caption, True, WHITE)
        text_width, text_height = label.get_size()
        surface.blit(
            label,
            (round(x + width / 2 - text_width / 2), round(y + height / 2 - text_height / 2 - 3)),
        )

    def _dropdown_button(self, surface, dropdown) -> None:
        x, y, width, height = dropdown.bounds
        rect = pygame.Rect(round(x), round(y), round(width), round(height))
        pygame.draw.rect(surface, WHITE, rect)
        pygame.draw.rect(surface, BLACK, rect.inflate(2, 2), 1)
        self._text(surface, self.fonts.label, dropdown.label, (x + 5, y + 5))

    @property
    def fonts(self) -> _Fonts:
        if self._fonts is None:
            raise RuntimeError("fonts are loaded when the window runs")
        return self._fonts

    def _draw_welcome(self, surface) -> None:
        fonts = self.fonts
        title = fonts.title.render(WELCOME, True, BLACK)
        surface.blit(title, (round(surface.get_width() / 2 - title.get_width() / 2), 100))
        self._text(surface, fonts.label, "Source Station:", (100, 200))
        self._dropdown_button(surface, self.app.source)
        self._text(surface, fonts.label, "Destination Station:", (100, 280))
        self._dropdown_button(surface, self.app.destination)
        self._button(surface, self.app.search_button, GREEN, "Search")

        for dropdown in (self.app.source, self.app.destination):
            if dropdown.is_open:
                for index, name in enumerate(dropdown.items):
                    x, y, _, _ = dropdown.item_bounds(index)
                    self._text(surface, fonts.label, name, (x, y))

    def _draw_map(self, surface) -> None:
        app = self.app
        layout = app.layout
        for start, end, color in self.segments():
            pygame.draw.line(surface, color, start, end)
        if layout is not None:
            for station in app.stations:
                centre = layout.to_screen(station.x, station.y)
                pygame.draw.circle(surface, station.color, centre, STATION_RADIUS)
        for start, end, color in self.path_segments():
            pygame.draw.line(surface, color, start, end)

        self._button(surface, app.back_button, BLUE, "Back")
        height = surface.get_height()
        self._text(surface, self.fonts.summary, app.shortest_summary, (50, height - 100))
        self._text(surface, self.fonts.summary, app.exchanges_summary, (50, height - 130))

        if app.hovered is None or layout is None:
            return
        station = app.stations[app.hovered]
        dot_x, dot_y = layout.to_screen(station.x, station.y)
        label = self.fonts.hover.render(station.name, True, BLACK)
        text_width, text_height = label.get_size()
        box_x, box_y, box_width, box_height = hover_box(
            dot_x, dot_y, STATION_RADIUS, text_width, text_height,
            surface.get_width(), height,
        )
        left, top = round(box_x), round(box_y)
        width, tall = max(1, round(box_width)), max(1, round(box_height))
        panel = pygame.Surface((width, tall), pygame.SRCALPHA)
        panel.fill(HOVER_FILL)
        surface.blit(panel, (left, top))
        pygame.draw.rect(surface, BLACK, pygame.Rect(left - 1, top - 1, width + 2, tall + 2), 1)
        surface.blit(label, (round(box_x + HOVER_PADDING), round(box_y + HOVER_PADDING)))

    def _handle(self, event) -> bool:
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.app.click(*event.pos)
        elif event.type == pygame.MOUSEMOTION:
            self.app.hover(*event.pos)
        return True

    def run(self) -> int:
        """Show the window until it is closed; return an exit status."""
        pygame.init()
        try:
            self._fonts = _Fonts(
                title=_load_font(self.bold_font_path, 30, "Error loading bold font!"),
                label=_load_font(self.font_path, 20, "Error loading font!"),
                summary=_load_font(self.font_path, 18, "Error loading font!"),
                button=_load_font(self.bold_font_path, 20, "Error loading bold font!"),
                hover=_load_font(self.bold_font_path, 14, "Error loading bold font!"),
            )
            screen = pygame.display.set_mode((self.app.width, self.app.height))
            pygame.display.set_caption(TITLE)
            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if not self._handle(event):
                        running = False
                        break
                screen.fill(WHITE)
                if self.app.page is Page.WELCOME:
                    self._draw_welcome(screen)
                else:
                    self._draw_map(screen)
                pygame.display.flip()
                clock.tick(60)
            return 0
        finally:
            self._fonts = None
            pygame.quit()


def main(argv: Optional[List[str]] = None) -> int:
    """Open the route finder window."""
    parser = argparse.ArgumentParser(description="Find metro routes on a map.")
    parser.add_argument("--connections", default=DEFAULT_CONNECTIONS, help="connections file")
    parser.add_argument("--stations", default=DEFAULT_STATIONS, help="station coordinates file")
    parser.add_argument("--font", default=DEFAULT_FONT)
    parser.add_argument("--bold-font", default=DEFAULT_BOLD_FONT)
    parser.add_argument("--width", type=int, default=1200)
    parser.add_argument("--height", type=int, default=800)
    args = parser.parse_args(argv)
    app = MetroApp.from_files(args.connections, args.stations, args.width, args.height)
    return AppView(app, args.font, args.bold_font).run()


if __name__ == "__main__":
    sys.exit(main())