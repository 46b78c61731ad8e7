"""HTTP service answering route queries over a metro network."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Callable, Iterable, List, Optional
from urllib.parse import parse_qs
from wsgiref.simple_server import make_server

from metroroute.graph import MetroGraph, RouteError

DEFAULT_CSV = "Delhi_Metro_Lines.csv"
DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8080


def _respond(start_response: Callable, status: str, body: bytes, content_type: str,
             extra: Iterable = ()) -> List[bytes]:
    headers = [("Content-Type", content_type), ("Content-Length", str(len(body)))]
    headers.extend(extra)
    start_response(status, headers)
    return [body]


def create_app(graph: MetroGraph) -> Callable:
    """Build a WSGI application serving ``/shortest_path`` and ``/min_exchanges``."""
    routes = {
        "/shortest_path": graph.shortest_path,
        "/min_exchanges": graph.minimum_exchanges,
    }

    def app(environ, start_response):
        handler = routes.get(environ.get("PATH_INFO", ""))
        if handler is None or environ.get("REQUEST_METHOD", "GET") not in ("GET", "HEAD"):
            return _respond(start_response, "404 Not Found", b"", "text/plain")

        params = parse_qs(environ.get("QUERY_STRING", ""), keep_blank_values=True)
        if "source" not in params or "destination" not in params:
            return _respond(start_response, "400 Bad Request", b"Missing parameters", "text/plain")

        try:
            result = handler(params["source"][0], params["destination"][0]).to_json()
        except RouteError as error:
            result = {"error": str(error)}
        body = json.dumps(result, indent=4, sort_keys=True, ensure_ascii=False).encode("utf-8")
        return _respond(
            start_response,
            "200 OK",
            body,
            "application/json",
            [("Access-Control-Allow-Origin", "*")],
        )

    return app


def serve(graph: MetroGraph, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    """Serve route queries until interrupted."""
    with make_server(host, port, create_app(graph)) as httpd:
        print(f"Server listening on http://{host}:{port}", flush=True)
        httpd.serve_forever()


def main(argv: Optional[List[str]] = None) -> int:
    """Load the network from CSV and start the route service."""
    parser = argparse.ArgumentParser(description="Serve metro route queries over HTTP.")
    parser.add_argument("--csv", default=DEFAULT_CSV, help="connections file")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    graph = MetroGraph()
    try:
        graph.load_csv(args.csv)
    except OSError:
        print("Error opening file!", file=sys.stderr)

    try:
        serve(graph, args.host, args.port)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())