from unittest import mock

import pygame
import pytest

from metroroute.app import MetroApp, Page, app_color
from metroroute.appview import AppView
from metroroute.graph import MetroGraph
from metroroute.layout import Station


def _app():
    graph = MetroGraph()
    graph.add_edge("A", "B", 1.0, "Blue")
    graph.add_edge("B", "C", 1.0, "Blue")
    graph.add_edge("A", "D", 5.0, "Red")
    graph.add_edge("D", "C", 1.0, "Red")
    graph.add_edge("C", "Z", 2.0, "Green")
    stations = [
        Station("A", 0.0, 0.0, app_color("Blue")),
        Station("B", 10.0, 0.0, app_color("Blue")),
        Station("C", 10.0, 10.0, app_color("Blue")),
        Station("D", 0.0, 10.0, app_color("Red")),
    ]
    return MetroApp(graph, stations)


def _searched():
    app = _app()
    app.source.selected = "A"
    app.destination.selected = "C"
    assert app.search()
    return app


def test_no_segments_before_search():
    view = AppView(_app())
    assert view.segments() == []
    assert view.path_segments() == []


def test_segments_cover_known_connections_both_ways():
    app = _searched()
    segments = AppView(app).segments()
    # four edges between stations with coordinates, each drawn in both directions
    assert len(segments) == 8
    a = app.layout.to_screen(0.0, 0.0)
    b = app.layout.to_screen(10.0, 0.0)
    assert (a, b, (0, 0, 255)) in segments
    assert (b, a, (0, 0, 255)) in segments


def test_segments_skip_stations_without_coordinates():
    app = _searched()
    points = {point for start, end, _ in AppView(app).segments() for point in (start, end)}
    expected = {app.layout.to_screen(s.x, s.y) for s in app.stations}
    assert points == expected


def test_segment_colors_follow_lines():
    app = _searched()
    colors = {color for _, _, color in AppView(app).segments()}
    assert colors == {app_color("Blue"), app_color("Red")}


def test_path_segments_follow_shortest_route():
    app = _searched()
    assert app.shortest.path == ("A", "B", "C")
    segments = AppView(app).path_segments()
    assert len(segments) == len(app.shortest.path) - 1
    assert all(color == (255, 0, 0) for _, _, color in segments)
    for (_, end), (start, _) in zip(
        [(s, e) for s, e, _ in segments], [(s, e) for s, e, _ in segments[1:]]
    ):
        assert end == start
    assert segments[0][0] == app.layout.to_screen(0.0, 0.0)
    assert segments[-1][1] == app.layout.to_screen(10.0, 10.0)


@pytest.fixture
def dummy_display(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


def test_run_passes_clicks_to_app(dummy_display):
    app = _app()
    click = pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(150, 240), button=1)
    quit_event = pygame.event.Event(pygame.QUIT)
    with mock.patch("pygame.event.get", side_effect=[[click], [quit_event]]):
        status = AppView(app).run()
    assert status == 0
    assert app.source.is_open is True
    assert app.destination.is_open is False


def test_run_draws_map_with_hover(dummy_display):
    app = _searched()
    x, y = app.layout.to_screen(0.0, 0.0)
    motion = pygame.event.Event(pygame.MOUSEMOTION, pos=(int(x) + 1, int(y) + 1), rel=(0, 0), buttons=(0, 0, 0))
    quit_event = pygame.event.Event(pygame.QUIT)
    with mock.patch("pygame.event.get", side_effect=[[motion], [quit_event]]):
        status = AppView(app).run()
    assert status == 0
    assert app.page is Page.MAP
    assert app.hovered == 0


def test_run_back_button_returns_to_welcome(dummy_display):
    app = _searched()
    bx, by, bw, bh = app.back_button
    click = pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(int(bx + bw / 2), int(by + bh / 2)), button=1)
    quit_event = pygame.event.Event(pygame.QUIT)
    with mock.patch("pygame.event.get", side_effect=[[click], [quit_event]]):
        AppView(app).run()
    assert app.page is Page.WELCOME