"""Shared fixtures."""

from __future__ import annotations

import time
from typing import Callable, Iterator

import httpx
import pytest


def _trickle(chunks: int, delay: float, chunk: bytes = b"<p>x</p>") -> Iterator[bytes]:
    for _ in range(chunks):
        time.sleep(delay)
        yield chunk


@pytest.fixture()
def trickle() -> Callable[..., Iterator[bytes]]:
    """Body generator yielding *chunks* pieces, sleeping *delay* seconds before each."""
    return _trickle


@pytest.fixture()
def serve(monkeypatch) -> Callable[[Callable[[httpx.Request], httpx.Response]], None]:
    """Route every ``httpx.Client`` built during the test through *handler*.

    Unlike respx routes, a ``MockTransport`` hands streamed bodies to the
    client lazily, so slow responses behave like slow servers.
    """
    real_client = httpx.Client

    def install(handler: Callable[[httpx.Request], httpx.Response]) -> None:
        monkeypatch.setattr(
            httpx,
            "Client",
            lambda **kwargs: real_client(transport=httpx.MockTransport(handler), **kwargs),
        )

    return install
