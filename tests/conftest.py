"""Pytest configuration and fixtures for todocat tests."""

from typing import List

import httpx
import pytest
from fastapi.testclient import TestClient

from todocat.clients import build_async_client
from todocat.models import ServerConfig
from todocat.server import create_app

TODO_BASE = "http://todo.test"
CATS_BASE = "http://cats.test"

TODO_TITLE = "get another cat"
CAT_FACT = "cats are the best living creatures in the universe"


class FakeUpstreams:
    """In-process stand-in for the to-do and cat fact services."""

    def __init__(self):
        self.todo_body = b'{"userId": 1, "id": 1, "title": "get another cat", "completed": false}'
        self.cats_body = (
            b'{"status": {"verified": true}, "type": "cat", '
            b'"text": "cats are the best living creatures in the universe"}'
        )
        self.todo_status = 200
        self.cats_status = 200
        self.todo_down = False
        self.cats_down = False
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        json_headers = {"content-type": "application/json"}

        if request.url.host == "todo.test":
            if self.todo_down:
                raise httpx.ConnectError("connection refused", request=request)
            if request.url.path != "/todos/1":
                return httpx.Response(404)
            return httpx.Response(self.todo_status, content=self.todo_body, headers=json_headers)

        if request.url.host == "cats.test":
            if self.cats_down:
                raise httpx.ConnectError("connection refused", request=request)
            if request.url.path != "/facts/random":
                return httpx.Response(404)
            return httpx.Response(self.cats_status, content=self.cats_body, headers=json_headers)

        raise httpx.ConnectError(f"unknown host {request.url.host}", request=request)

    def hosts_called(self) -> List[str]:
        return [r.url.host for r in self.requests]


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def upstreams() -> FakeUpstreams:
    return FakeUpstreams()


@pytest.fixture
def http_client(upstreams: FakeUpstreams) -> httpx.AsyncClient:
    """Shared AsyncClient routed to the fake upstreams."""
    return build_async_client(transport=httpx.MockTransport(upstreams.handler))


@pytest.fixture
def server_config() -> ServerConfig:
    return ServerConfig(todo_url=TODO_BASE, cats_url=CATS_BASE)


@pytest.fixture
def client(server_config: ServerConfig, http_client: httpx.AsyncClient):
    """TestClient with the lifespan (shared client, service) running."""
    with TestClient(create_app(server_config, http_client)) as test_client:
        yield test_client
