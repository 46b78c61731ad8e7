"""Interactive window plotting station positions, with names shown on hover."""

from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional, Sequence, Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from metroroute.layout import (  # noqa: E402
    BLACK,
    HOVER_PADDING,
    STATION_RADIUS,
    MapLayout,
    Station,
    hover_box,
    load_stations,
)

WHITE = (255, 255, 255)
HOVER_FILL = (255, 255, 255, 200)
FONT_SIZE = 14
TITLE = "Delhi Metro Map"
DEFAULT_STATIONS = "metro_coordinates.csv"
DEFAULT_FONT = "fonts/OpenSans-Bold.ttf"
DEFAULT_WIDTH = 1200
DEFAULT_HEIGHT = 800


def _draw(
    surface: "pygame.Surface",
    stations: Sequence[Station],
    layout: MapLayout,
    hovered: Optional[int],
    font: "pygame.font.Font",
) -> None:
    surface.fill(WHITE)
    for station in stations:
        left, top = layout.to_screen(station.x, station.y)
        pygame.draw.circle(
            surface, station.color, (left + STATION_RADIUS, top + STATION_RADIUS), STATION_RADIUS
        )

    if hovered is None:
        return

    station = stations[hovered]
    dot_x, dot_y = layout.to_screen(station.x, station.y)
    label = font.render(station.name, True, BLACK)
    text_width, text_height = label.get_size()
    box_x, box_y, box_width, box_height = hover_box(
        dot_x, dot_y, STATION_RADIUS, text_width, text_height,
        surface.get_width(), surface.get_height(),
    )
    left, top = round(box_x), round(box_y)
    width, height = max(1, round(box_width)), max(1, round(box_height))

    panel = pygame.Surface((width, height), pygame.SRCALPHA)
    panel.fill(HOVER_FILL)
    surface.blit(panel, (left, top))
    pygame.draw.rect(surface, BLACK, pygame.Rect(left - 1, top - 1, width + 2, height + 2), 1)
    surface.blit(label, (round(box_x + HOVER_PADDING), round(box_y + HOVER_PADDING)))


def run_viewer(
    stations_path: Union[str, os.PathLike] = DEFAULT_STATIONS,
    font_path: Optional[Union[str, os.PathLike]] = DEFAULT_FONT,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
) -> int:
    """Show the station map until the window is closed; return an exit status.

    ``font_path`` of ``None`` selects pygame's built-in font.
    """
    pygame.init()
    try:
        try:
            font = pygame.font.Font(font_path, FONT_SIZE)
        except OSError:
            print("Error loading font!", file=sys.stderr)
            return 1
        try:
            stations: List[Station] = load_stations(stations_path)
        except OSError:
            print("Error opening file!", file=sys.stderr)
            return 1
        try:
            layout = MapLayout.fit(stations, width, height)
        except ValueError as error:
            print(f"Error: {error}", file=sys.stderr)
            return 1

        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        hovered: Optional[int] = None
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEMOTION:
                    hovered = layout.station_at(stations, *event.pos)
            _draw(screen, stations, layout, hovered, font)
            pygame.display.flip()
            clock.tick(60)
        return 0
    finally:
        pygame.quit()


def main(argv: Optional[List[str]] = None) -> int:
    """Open the station map window."""
    parser = argparse.ArgumentParser(description="Show metro station positions.")
    parser.add_argument("--stations", default=DEFAULT_STATIONS, help="station coordinates file")
    parser.add_argument("--font", default=DEFAULT_FONT, help="font for station labels")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    args = parser.parse_args(argv)
    return run_viewer(args.stations, args.font, args.width, args.height)


if __name__ == "__main__":
    sys.exit(main())