"""Fetch the content at URLs, one after another or all at once."""

from __future__ import annotations

import http.client
import sys
import time
import urllib.error
import urllib.request
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any

_CHUNK = 64 * 1024
_READ_ERRORS = (OSError, http.client.HTTPException)


def _open(url: str) -> Any:
    """Open url; an HTTP error status still yields its response."""
    try:
        return urllib.request.urlopen(url)
    except urllib.error.HTTPError as err:
        return err


def fetch(url: str) -> bytes:
    """Return the body found at url, whatever the response status."""
    with _open(url) as resp:
        return resp.read()


def _drain(resp: Any) -> int:
    total = 0
    while chunk := resp.read(_CHUNK):
        total += len(chunk)
    return total


def fetch_report(url: str) -> str:
    """Fetch url and describe the time taken and bytes read, or the error."""
    start = time.perf_counter()
    try:
        resp = _open(url)
    except (OSError, ValueError) as err:
        return str(err)
    try:
        with resp:
            nbytes = _drain(resp)
    except _READ_ERRORS as err:
        return f"while reading {url}: {err}"
    secs = time.perf_counter() - start
    return f"{secs:.2f}s  {nbytes:7d}  {url}"


def fetch_all(urls: Iterable[str]) -> Iterator[str]:
    """Fetch all urls concurrently and yield their reports as they finish."""
    urls = list(urls)
    if not urls:
        return
    with ThreadPoolExecutor(max_workers=len(urls)) as pool:
        futures = [pool.submit(fetch_report, url) for url in urls]
        for future in as_completed(futures):
            yield future.result()


def fetch_main(argv: list[str] | None = None) -> int:
    """Print the content found at each url named on the command line."""
    for url in sys.argv[1:] if argv is None else argv:
        try:
            resp = _open(url)
        except (OSError, ValueError) as err:
            print(f"fetch: {err}", file=sys.stderr)
            return 1
        try:
            with resp:
                body = resp.read()
        except _READ_ERRORS as err:
            print(f"fetch: reading {url}: {err}", file=sys.stderr)
            return 1
        sys.stdout.buffer.write(body)
        sys.stdout.buffer.flush()
    return 0


def fetchall_main(argv: list[str] | None = None) -> int:
    """Fetch the named urls in parallel and report their times and sizes."""
    start = time.perf_counter()
    for report in fetch_all(sys.argv[1:] if argv is None else argv):
        print(report)
    print(f"{time.perf_counter() - start:.2f}s elapsed")
    return 0