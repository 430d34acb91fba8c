"""Tests for the basic and double handlers."""

import dataclasses

import pytest

from todocat.clients import UpstreamClient
from todocat.exceptions import DecodeError, NetworkError, UpstreamStatusError
from todocat.services import FanoutService

from .conftest import CAT_FACT, CATS_BASE, TODO_BASE, TODO_TITLE


@pytest.fixture
def service(http_client, server_config):
    return FanoutService(UpstreamClient(http_client), server_config)


@pytest.mark.anyio
class TestBasic:

    async def test_returns_title(self, service, upstreams):
        assert await service.basic(TODO_BASE) == TODO_TITLE
        assert upstreams.hosts_called() == ["todo.test"]

    async def test_requests_first_todo(self, service, upstreams):
        await service.basic(TODO_BASE)

        assert upstreams.requests[0].method == "GET"
        assert upstreams.requests[0].url.path == "/todos/1"

    async def test_decode_failure_aborts(self, service, upstreams):
        upstreams.todo_body = b'{"name": "no title here"}'

        with pytest.raises(DecodeError):
            await service.basic(TODO_BASE)

    async def test_handle_basic_uses_configured_url(self, service):
        assert await service.handle_basic() == TODO_TITLE


@pytest.mark.anyio
class TestDouble:

    async def test_composes_both_answers(self, service):
        result = await service.double(CATS_BASE, TODO_BASE)

        assert result == f"Todo: {TODO_TITLE}, Cat Fact: {CAT_FACT}"

    async def test_todo_fetched_before_cat_fact(self, service, upstreams):
        await service.double(CATS_BASE, TODO_BASE)

        assert upstreams.hosts_called() == ["todo.test", "cats.test"]

    async def test_unreachable_todo_skips_cat_fact(self, service, upstreams):
        upstreams.todo_down = True

        with pytest.raises(NetworkError):
            await service.double(CATS_BASE, TODO_BASE)

        assert upstreams.hosts_called() == ["todo.test"]

    async def test_bad_todo_body_skips_cat_fact(self, service, upstreams):
        upstreams.todo_body = b"oops"

        with pytest.raises(DecodeError):
            await service.double(CATS_BASE, TODO_BASE)

        assert "cats.test" not in upstreams.hosts_called()

    async def test_cat_fact_failure_aborts(self, service, upstreams):
        upstreams.cats_status = 500

        with pytest.raises(UpstreamStatusError) as exc_info:
            await service.double(CATS_BASE, TODO_BASE)

        assert exc_info.value.upstream == "cats"

    async def test_concurrent_mode_gives_same_output(self, http_client, server_config, upstreams):
        config = dataclasses.replace(server_config, concurrent_double=True)
        service = FanoutService(UpstreamClient(http_client), config)

        result = await service.handle_double()

        assert result == f"Todo: {TODO_TITLE}, Cat Fact: {CAT_FACT}"
        assert sorted(upstreams.hosts_called()) == ["cats.test", "todo.test"]
