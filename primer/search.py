"""A search endpoint whose parameters are unpacked into a dataclass."""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlsplit

from primer.params import ParamError, unpack

ADDRESS = ("", 12345)


@dataclass
class SearchParams:
    """Parameters of a search request."""

    labels: list[str] = field(default_factory=list, metadata={"http": "l"})
    max_results: int = field(default=10, metadata={"http": "max"})
    exact: bool = field(default=False, metadata={"http": "x"})

    def __str__(self) -> str:
        labels = " ".join(self.labels)
        exact = "true" if self.exact else "false"
        return f"{{Labels:[{labels}] MaxResults:{self.max_results} Exact:{exact}}}"


def search(query: str | Mapping[str, Sequence[str]]) -> str:
    """Describe the search requested by ``query``; raises ParamError if it is malformed."""
    params = SearchParams()
    unpack(query, params)
    return f"Search: {params}\n"


class SearchHandler(BaseHTTPRequestHandler):
    """Serves /search; every other path is not found."""

    def do_GET(self) -> None:
        parts = urlsplit(self.path)
        if parts.path != "/search":
            self._send(404, "404 page not found\n")
            return
        try:
            body = search(parts.query)
        except ParamError as exc:
            self._send(400, f"{exc}\n")
            return
        self._send(200, body)

    def _send(self, status: int, text: str) -> None:
        body = text.encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        if status != 200:
            self.send_header("X-Content-Type-Options", "nosniff")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: object) -> None:
        pass


def main(argv: list[str] | None = None) -> int:
    """Serve the search endpoint on port 12345."""
    try:
        with ThreadingHTTPServer(ADDRESS, SearchHandler) as server:
            server.serve_forever()
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0