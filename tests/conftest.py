"""Shared fixtures for license-check tests."""
from __future__ import annotations

import io
from typing import Any, Callable

import httpx
import pytest
from click.testing import CliRunner
from rich.console import Console

from license_check.output.log import RunLog


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def run_log() -> RunLog:
    """Provide a RunLog writing to in-memory consoles."""
    return RunLog(
        console=Console(file=io.StringIO(), color_system=None),
        error_console=Console(file=io.StringIO(), color_system=None),
    )


class FakeServer:
    """Validation server stand-in backed by httpx.MockTransport.

    ``responses`` maps a coordinate key (``g:a:v``) to either a JSON-able
    dict, an httpx.Response, or an exception to raise. Unknown coordinates
    get a 404.
    """

    def __init__(self, responses: dict[str, Any]) -> None:
        self.responses = responses
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    @property
    def requested_keys(self) -> list[str]:
        return [request.url.path.rsplit("/", 1)[-1] for request in self.requests]

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = request.url.path.rsplit("/", 1)[-1]
        reply = self.responses.get(key)
        if reply is None:
            return httpx.Response(404, text="not found")
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, httpx.Response):
            return reply
        return httpx.Response(200, json=reply)


@pytest.fixture
def fake_server() -> Callable[[dict[str, Any]], FakeServer]:
    """Factory for FakeServer instances."""
    return FakeServer
