# metroroute

Find routes through a metro network. Stations and the lines between them come from a
CSV file, and two kinds of route can be asked for:

- the **shortest path** by total distance;
- the path with the **fewest line changes**, with distance as the tie-breaker.

Both are available from Python, over a small HTTP API, and in a map window.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Data files

The connection file holds rows of the form

```
station1,station2,line_color,distance
```

Every connection is travelled in both directions. Names and colours are stripped of
surrounding whitespace, and rows that join a station to itself or that leave a name
empty are ignored. A distance that does not start with a number counts as 0.

The coordinate file used by the map windows has a header line followed by rows of the
form

```
name,x,y,color
```

## Using it from Python

```python
from metroroute.graph import MetroGraph, RouteError

graph = MetroGraph()
graph.load_csv("Delhi_Metro_Lines.csv")  # first line skipped as a header

try:
    route = graph.shortest_path("Rajiv Chowk", "Kashmere Gate")
except RouteError as exc:
    print(exc)
else:
    print(route.to_json())

fewest = graph.minimum_exchanges("Rajiv Chowk", "Kashmere Gate")
print(fewest.to_json())
```

`load_csv(path, skip_header=True)` reads a connection file; pass `skip_header=False`
when the file has no header line. `add_edge(station1, station2, distance, line_color)`
adds a single connection, and `stations()` returns all station names, sorted.

A `Route` has `path` (the stations in order), `lines` (the line used for each hop),
`total_distance`, and, for routes from `minimum_exchanges`, `total_line_changes`.
`to_json()` returns these as a dictionary.

`StationNotFoundError` is raised when either station is not in the network and
`NoPathError` when the two are not connected; both derive from `RouteError`. Asking
`shortest_path` for a route from a station to itself raises `NoPathError`, while
`minimum_exchanges` returns a one-station route with no line changes.

`metroroute.layout` reads coordinate files (`load_stations`, `parse_stations`) and
holds the map geometry used by the windows: `MapLayout` fits stations into a window
and finds the station under a pixel, and `hover_box` places a label beside a dot.
`metroroute.app.MetroApp` holds the state of the route finder window and can be
driven without a display through `click`, `hover` and `search`.

## HTTP API

```
metroroute-server [--csv FILE] [--host HOST] [--port PORT]
```

loads the connection file (default `Delhi_Metro_Lines.csv`, header line skipped) and
listens on `localhost:8080` unless told otherwise. If the file cannot be opened it
prints `Error opening file!` and serves an empty network. It answers two GET
requests, each taking `source` and `destination` query parameters:

- `/shortest_path` returns `path`, `lines` and `total_distance`;
- `/min_exchanges` returns `path`, `lines`, `total_line_changes` and `total_distance`.

Responses are indented JSON with sorted keys and carry
`Access-Control-Allow-Origin: *`. If a station is unknown or no route exists, the
body holds an `error` message instead, such as
`Error: One or both stations not found!` or `Error: No path found!`. A request missing
either parameter gets status 400 with the text `Missing parameters`; any other path
gets 404.

To serve from your own code, build the WSGI application with `create_app(graph)` or
start it directly with `serve(graph, host, port)`, both in `metroroute.server`.

## Map viewer

```
metroroute-viewer [--stations FILE] [--font FILE] [--width W] [--height H]
```

opens a 1200×800 window plotting every station from `metro_coordinates.csv` in its
line colour (Blue, Red, Yellow, Green, Violet, Magenta, Orange or Pink; anything else
is black). Hovering over a station shows its name in a box beside it. Labels use
`fonts/OpenSans-Bold.ttf` by default; the viewer exits with status 1 if the font or
the coordinate file cannot be read, or if the stations do not span an area.

## Route finder window

```
metroroute-app [--connections FILE] [--stations FILE] [--font FILE] [--bold-font FILE] [--width W] [--height H]
```

opens a window where the source and destination stations are chosen from dropdown
lists of the stations in the coordinate file. Here the connection file is read
without skipping a header line. Fonts default to `fonts/OpenSans-Regular.ttf` and
`fonts/OpenSans-Bold.ttf`, falling back to pygame's built-in font when missing.

Pressing **Search** with both stations chosen switches to a map of the whole network,
each connection drawn in its line's colour and the shortest path in red. Below it are
the route with the fewest exchanges and the shortest path with its distance, truncated
to two decimals. Hovering over a station shows its name. **Back** returns to the
selection page.

## Limits

The HTTP service runs on the standard library's single-threaded development server
and has no TLS or authentication. Stations can only be chosen from the dropdown
lists; there is no typed search.