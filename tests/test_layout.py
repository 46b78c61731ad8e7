import pytest

from metroroute.layout import (
    MapLayout,
    Station,
    color_from_name,
    hover_box,
    load_stations,
    parse_stations,
)


def test_known_line_colours():
    assert color_from_name("Violet") == (148, 0, 211)
    assert color_from_name("Orange") == (255, 140, 0)
    assert color_from_name("Pink") == (255, 105, 180)


def test_unknown_colour_is_black():
    assert color_from_name("Grey") == color_from_name("")
    assert color_from_name("Grey") == (0, 0, 0)


def test_parse_skips_header():
    lines = ["name,x,y,color\n", "Alpha,1.5,2.5,Red\n", "Beta,-3,4,Blue\n"]
    stations = parse_stations(lines)
    assert stations == [
        Station("Alpha", 1.5, 2.5, color_from_name("Red")),
        Station("Beta", -3.0, 4.0, color_from_name("Blue")),
    ]


def test_parse_empty_input():
    assert parse_stations([]) == []
    assert parse_stations(["header only\n"]) == []


def test_parse_handles_crlf_colour():
    stations = parse_stations(["h\r\n", "Gamma,0,0,Green\r\n"])
    assert stations[0].color == color_from_name("Green")


def test_parse_missing_colour_is_black():
    stations = parse_stations(["h", "Delta,1,2"])
    assert stations[0].color == color_from_name("nothing")


def test_parse_bad_coordinate_raises():
    with pytest.raises(ValueError):
        parse_stations(["h", "Alpha,abc,2,Red"])


def test_parse_short_row_raises():
    with pytest.raises(ValueError):
        parse_stations(["h", "Alpha"])


def test_load_stations_round_trip(tmp_path):
    path = tmp_path / "coords.csv"
    path.write_text("name,x,y,color\nAlpha,10,20,Yellow\nBeta,30,40,Pink\n", encoding="utf-8")
    stations = load_stations(path)
    assert [s.name for s in stations] == ["Alpha", "Beta"]
    assert (stations[1].x, stations[1].y) == (30.0, 40.0)
    assert stations[0].color == color_from_name("Yellow")


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        load_stations(tmp_path / "absent.csv")


STATIONS = [Station("A", 0.0, 0.0), Station("B", 10.0, 20.0), Station("C", 5.0, 10.0)]


def test_fit_maps_corners_to_margins():
    layout = MapLayout.fit(STATIONS, 1200, 800)
    assert layout.to_screen(0.0, 0.0) == pytest.approx((50.0, 750.0))
    assert layout.to_screen(10.0, 20.0) == pytest.approx((1150.0, 50.0))


def test_fit_with_large_bottom_margin():
    layout = MapLayout.fit(STATIONS, 1200, 800, bottom_margin=150)
    assert layout.to_screen(0.0, 0.0) == pytest.approx((50.0, 650.0))
    assert layout.to_screen(10.0, 20.0) == pytest.approx((1150.0, 0.0))


def test_fit_midpoint_is_centre():
    layout = MapLayout.fit(STATIONS, 1200, 800)
    low = layout.to_screen(0.0, 0.0)
    high = layout.to_screen(10.0, 20.0)
    mid = layout.to_screen(5.0, 10.0)
    assert mid == pytest.approx(((low[0] + high[0]) / 2, (low[1] + high[1]) / 2))


def test_fit_empty_raises():
    with pytest.raises(ValueError):
        MapLayout.fit([], 1200, 800)


def test_fit_degenerate_raises():
    with pytest.raises(ValueError):
        MapLayout.fit([Station("A", 1.0, 1.0), Station("B", 1.0, 5.0)], 1200, 800)


def test_station_at_hits_dot():
    layout = MapLayout.fit(STATIONS, 1200, 800)
    left, top = layout.to_screen(10.0, 20.0)
    assert layout.station_at(STATIONS, left + 3, top + 3) == 1
    assert layout.station_at(STATIONS, left, top) == 1


def test_station_at_misses():
    layout = MapLayout.fit(STATIONS, 1200, 800)
    left, top = layout.to_screen(10.0, 20.0)
    assert layout.station_at(STATIONS, left - 1, top) is None
    assert layout.station_at(STATIONS, left + 12, top + 3) is None
    assert layout.station_at(STATIONS, left + 3, top + 12) is None


def test_station_at_returns_first_match():
    stations = STATIONS + [Station("A2", 0.0, 0.0)]
    layout = MapLayout.fit(stations, 1200, 800)
    left, top = layout.to_screen(0.0, 0.0)
    assert layout.station_at(stations, left + 1, top + 1) == 0


def test_hover_box_right_of_dot():
    x, y, w, h = hover_box(100, 100, 6, 40, 10, 1200, 800)
    assert (w, h) == (50, 20)
    assert x == 111
    assert y + h / 2 == 100


def test_hover_box_flips_left_at_right_edge():
    x, y, w, h = hover_box(1190, 400, 6, 40, 10, 1200, 800)
    assert x + w <= 1190 - 6
    assert x + w <= 1200


def test_hover_box_moves_below_at_top():
    x, y, w, h = hover_box(100, 2, 6, 40, 10, 1200, 800)
    assert y >= 0
    assert y > 2


def test_hover_box_moves_above_at_bottom():
    x, y, w, h = hover_box(100, 798, 6, 40, 10, 1200, 800)
    assert y + h <= 800
    assert y + h < 798