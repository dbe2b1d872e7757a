"""Fetch URLs, one at a time to standard output or in parallel to files."""

from __future__ import annotations

import http.client
import sys
import time
import urllib.error
import urllib.request
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import BinaryIO

HTTP_PREFIX = "http://"
_CHUNK = 64 * 1024
_ERRORS = (OSError, ValueError, http.client.HTTPException)


def normalize_url(url: str) -> str:
    """Prefix ``url`` with http:// unless it already starts with it."""
    return url if url.startswith(HTTP_PREFIX) else HTTP_PREFIX + url


def dump_filename(url: str) -> str:
    """Name of the file a fetched URL's body is saved to."""
    return url.removeprefix("https://").removeprefix("http://") + "-dump.html"


def _get(url: str):
    """Open ``url``; an HTTP error status is returned as a response, not raised."""
    try:
        return urllib.request.urlopen(url)
    except urllib.error.HTTPError as err:
        return err


def _copy(src, dst: BinaryIO) -> int:
    total = 0
    for chunk in iter(lambda: src.read(_CHUNK), b""):
        dst.write(chunk)
        total += len(chunk)
    return total


def fetch(url: str, out: BinaryIO) -> str:
    """Copy the body at ``url`` to ``out`` and return the status line, e.g. "200 OK"."""
    resp = _get(url)
    with resp:
        try:
            _copy(resp, out)
        except _ERRORS as exc:
            raise OSError(f"reading {url}: {exc}") from exc
        return f"{resp.getcode()} {resp.reason}"


def fetch_to_file(url: str) -> str:
    """Save the body at ``url`` to a dump file and return a one-line report."""
    start = time.monotonic()
    try:
        resp = _get(url)
    except _ERRORS as exc:
        return str(exc)
    with resp:
        try:
            output = open(dump_filename(url), "wb")
        except OSError as exc:
            return f"while create output file: {exc}"
        with output:
            try:
                nbytes = _copy(resp, output)
            except _ERRORS as exc:
                return f"while reading {url}: {exc}"
    secs = time.monotonic() - start
    return f"{secs:.2f}s  {nbytes:7d}  {url}"


def fetch_all(urls: Iterable[str]) -> Iterator[str]:
    """Fetch all ``urls`` in parallel, yielding each report as it completes."""
    targets = list(urls)
    if not targets:
        return
    with ThreadPoolExecutor(max_workers=len(targets)) as pool:
        futures = [pool.submit(fetch_to_file, url) for url in targets]
        for future in as_completed(futures):
            yield future.result()


def main(argv: list[str] | None = None) -> int:
    """Print the content and status of each URL given."""
    args = sys.argv[1:] if argv is None else argv
    for arg in args:
        url = normalize_url(arg)
        sys.stdout.flush()
        try:
            status = fetch(url, sys.stdout.buffer)
        except _ERRORS as exc:
            print(f"fetch: {exc}", file=sys.stderr)
            return 1
        sys.stdout.buffer.flush()
        sys.stdout.write(status)
    sys.stdout.flush()
    return 0


def fetchall_main(argv: list[str] | None = None) -> int:
    """Fetch the URLs given in parallel and report times and sizes."""
    args = sys.argv[1:] if argv is None else argv
    start = time.monotonic()
    for message in fetch_all(args):
        print(message)
    print(f"{time.monotonic() - start:.2f}s elapsed")
    return 0