"""Deadline-bounded GET shared by the page fetch and the site-file lookups.

httpx timeouts bound each connect/read step separately, so a server that
trickles its body never trips them.  :func:`get_with_deadline` streams the
response and enforces one wall-clock budget over redirects, headers and body.
"""

from __future__ import annotations

import time
from typing import Tuple

import httpx


def get_with_deadline(
    client: httpx.Client,
    url: str,
    timeout: float,
    read_body: bool = True,
) -> Tuple[httpx.Response, str]:
    """GET *url* and return ``(response, text)`` within *timeout* seconds.

    With ``read_body=False`` only the status line and headers are awaited and
    the returned text is empty.

    Raises:
        httpx.ReadTimeout: If the total elapsed time exceeds *timeout*.
        httpx.RequestError: Any transport failure from the client.
    """
    deadline = time.perf_counter() + timeout

    def _check(request: httpx.Request) -> None:
        if time.perf_counter() > deadline:
            raise httpx.ReadTimeout(
                f"Exceeded {timeout:g}s total deadline for {url}", request=request
            )

    with client.stream("GET", url, timeout=timeout) as response:
        _check(response.request)
        if not read_body:
            return response, ""

        chunks = []
        for chunk in response.iter_bytes():
            _check(response.request)
            chunks.append(chunk)

    body = b"".join(chunks)
    try:
        return response, body.decode(response.encoding or "utf-8", errors="replace")
    except LookupError:
        # unknown charset label in Content-Type
        return response, body.decode("utf-8", errors="replace")
