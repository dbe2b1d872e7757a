"""Minimal HTTP servers that echo the request path, count requests or echo requests."""

from __future__ import annotations

import argparse
import sys
import threading
from collections.abc import Mapping, Sequence
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import parse_qsl, unquote, urlsplit

DEFAULT_ADDRESS = ("localhost", 8000)

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def _escape(ch: str) -> str:
    if ch in _ESCAPES:
        return _ESCAPES[ch]
    if ch.isprintable():
        return ch
    cp = ord(ch)
    if cp < 0x80:
        return f"\\x{cp:02x}"
    if cp < 0x10000:
        return f"\\u{cp:04x}"
    return f"\\U{cp:08x}"


def _quote(s: str) -> str:
    return '"' + "".join(_escape(ch) for ch in s) + '"'


def _quote_list(values: Sequence[str]) -> str:
    return "[" + " ".join(_quote(v) for v in values) + "]"


def _canonical(name: str) -> str:
    return "-".join(part[:1].upper() + part[1:].lower() for part in name.split("-"))


def format_path(path: str) -> str:
    """Describe a request path, quoted."""
    return f"URL.Path = {_quote(path)}\n"


def format_request(
    method: str,
    url: str,
    proto: str,
    headers: Mapping[str, Sequence[str]],
    host: str,
    remote_addr: str,
    form: Mapping[str, Sequence[str]],
) -> str:
    """Describe a request: its line, headers, host, peer address and form values."""
    lines = [f"{method} {url} {proto}\n"]
    lines.extend(f"Header[{_quote(k)}] = {_quote_list(v)}\n" for k, v in headers.items())
    lines.append(f"Host = {_quote(host)}\n")
    lines.append(f"RemoteAddr = {_quote(remote_addr)}\n")
    lines.extend(f"Form[{_quote(k)}] = {_quote_list(v)}\n" for k, v in form.items())
    return "".join(lines)


class _TextHandler(BaseHTTPRequestHandler):
    def _reply(self, text: str) -> None:
        body = text.encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def _url_path(self) -> str:
        return unquote(urlsplit(self.path).path)

    def log_message(self, format: str, *args: object) -> None:
        pass


class EchoHandler(_TextHandler):
    """Replies with the path of each request."""

    def do_GET(self) -> None:
        self._reply(format_path(self._url_path()))

    do_POST = do_GET


class CountingHandler(_TextHandler):
    """Echoes paths and counts them; /count reports the number so far."""

    count = 0
    _lock = threading.Lock()

    def do_GET(self) -> None:
        cls = type(self)
        path = self._url_path()
        if path == "/count":
            with cls._lock:
                text = f"Count {cls.count}\n"
        else:
            with cls._lock:
                cls.count += 1
            text = format_path(path)
        self._reply(text)

    do_POST = do_GET


class RequestEchoHandler(_TextHandler):
    """Replies with a description of the whole request."""

    def do_GET(self) -> None:
        self._reply(self._describe(b""))

    def do_POST(self) -> None:
        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length) if length > 0 else b""
        self._reply(self._describe(body))

    def _describe(self, body: bytes) -> str:
        headers: dict[str, list[str]] = {}
        for name, value in self.headers.items():
            key = _canonical(name)
            if key != "Host":
                headers.setdefault(key, []).append(value)
        form: dict[str, list[str]] = {}
        if (
            self.command in ("POST", "PUT", "PATCH")
            and self.headers.get_content_type() == "application/x-www-form-urlencoded"
        ):
            for key, value in parse_qsl(body.decode("utf-8", "replace"), keep_blank_values=True):
                form.setdefault(key, []).append(value)
        for key, value in parse_qsl(urlsplit(self.path).query, keep_blank_values=True):
            form.setdefault(key, []).append(value)
        host = self.headers.get("Host", "")
        remote = f"{self.client_address[0]}:{self.client_address[1]}"
        return format_request(
            self.command, self.path, self.request_version, headers, host, remote, form
        )


def serve(handler: type[BaseHTTPRequestHandler], address: tuple[str, int] = DEFAULT_ADDRESS) -> None:
    """Serve requests with ``handler`` on ``address`` until interrupted."""
    with ThreadingHTTPServer(address, handler) as server:
        server.serve_forever()


_HANDLERS = {"echo": EchoHandler, "count": CountingHandler, "request": RequestEchoHandler}


def main(argv: list[str] | None = None) -> int:
    """Run one of the servers on localhost:8000."""
    parser = argparse.ArgumentParser(prog="server", description="Run a small HTTP server.")
    parser.add_argument("kind", nargs="?", choices=sorted(_HANDLERS), default="echo")
    opts = parser.parse_args(sys.argv[1:] if argv is None else argv)
    serve(_HANDLERS[opts.kind], DEFAULT_ADDRESS)
    return 0