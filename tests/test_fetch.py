import io
import re
import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from primer.fetch import (
    dump_filename,
    fetch,
    fetch_all,
    fetch_to_file,
    fetchall_main,
    main,
    normalize_url,
)

BODY = b"hello, world\n"


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        if self.path.startswith("/missing"):
            self.send_error(404)
            return
        self.send_response(200)
        self.send_header("Content-Length", str(len(BODY)))
        self.end_headers()
        self.wfile.write(BODY)

    def log_message(self, format, *args):
        pass


@pytest.fixture()
def base_url():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}"
    finally:
        server.shutdown()
        server.server_close()


def _free_port():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def test_normalize_adds_scheme():
    assert normalize_url("gopl.io") == "http://gopl.io"


def test_normalize_keeps_http_url():
    assert normalize_url("http://gopl.io/x") == "http://gopl.io/x"


def test_dump_filename_strips_scheme():
    assert dump_filename("https://gopl.io") == "gopl.io-dump.html"
    assert dump_filename("http://gopl.io") == "gopl.io-dump.html"


def test_fetch_copies_body(base_url):
    out = io.BytesIO()
    assert fetch(base_url + "/", out) == "200 OK"
    assert out.getvalue() == BODY


def test_fetch_reports_error_status(base_url):
    out = io.BytesIO()
    assert fetch(base_url + "/missing", out) == "404 Not Found"


def test_fetch_to_file_saves_body(base_url, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    message = fetch_to_file(base_url)
    assert message.endswith(base_url)
    assert message.split()[1] == str(len(BODY))
    assert (tmp_path / dump_filename(base_url)).read_bytes() == BODY


def test_fetch_to_file_bad_url():
    assert "unknown url type" in fetch_to_file("not a url")


def test_fetch_all_reports_each(base_url, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    messages = list(fetch_all([base_url, "not a url"]))
    assert len(messages) == 2
    assert sum(m.endswith(base_url) for m in messages) == 1
    assert sum("unknown url type" in m for m in messages) == 1


def test_fetch_all_empty():
    assert list(fetch_all([])) == []


def test_main_prints_body_and_status(base_url, capsys):
    assert main([base_url.removeprefix("http://")]) == 0
    out = capsys.readouterr().out
    assert out.startswith(BODY.decode())
    assert out.endswith("200 OK")


def test_main_unreachable_fails(capsys):
    assert main([f"127.0.0.1:{_free_port()}"]) == 1
    assert capsys.readouterr().err.startswith("fetch: ")


def test_fetchall_main_reports_elapsed(capsys):
    assert fetchall_main(["not a url"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "unknown url type" in lines[0]
    assert re.fullmatch(r"\d+\.\d{2}s elapsed", lines[-1])