"""
Fan-out Service - business logic behind the /basic and /double routes.

Calls the upstream services, decodes their answers and formats the text
returned to the caller.
"""

import asyncio
import logging

from ..clients import UpstreamClient, todo_url, cats_url
from ..formatters import TextFormatter
from ..models import ServerConfig, TodoItem, CatFact
from ..parsers import ResponseParser

logger = logging.getLogger(__name__)


class FanoutService:
    """
    Handler facade shared by all requests.

    Holds only read-only state: the shared upstream client and the frozen
    server configuration.
    """

    def __init__(self, client: UpstreamClient, config: ServerConfig):
        self._client = client
        self._config = config

    @property
    def client(self) -> UpstreamClient:
        return self._client

    @property
    def config(self) -> ServerConfig:
        return self._config

    async def fetch_todo(self, todo_base_url: str) -> TodoItem:
        """GET {todo_base_url}/todos/1 and decode it"""
        response = await self._client.get(todo_url(todo_base_url), upstream="todo")
        return ResponseParser.decode_todo(response.content)

    async def fetch_cat_fact(self, cats_base_url: str) -> CatFact:
        """GET {cats_base_url}/facts/random and decode it"""
        response = await self._client.get(cats_url(cats_base_url), upstream="cats")
        return ResponseParser.decode_cat_fact(response.content)

    async def basic(self, todo_base_url: str) -> str:
        """
        Return the title of the to-do item.

        Args:
            todo_base_url: Base URL of the to-do service

        Returns:
            The title, unformatted

        Raises:
            UpstreamError: If the fetch or the decode fails
        """
        todo = await self.fetch_todo(todo_base_url)
        return TextFormatter.format_basic(todo)

    async def double(self, cats_base_url: str, todo_base_url: str) -> str:
        """
        Return "Todo: <title>, Cat Fact: <text>".

        The to-do item is fetched and decoded before the cat fact service is
        contacted, so a to-do failure means no cat fact request is made.
        With concurrent_double enabled both calls run at once instead.

        Args:
            cats_base_url: Base URL of the cat fact service
            todo_base_url: Base URL of the to-do service

        Returns:
            Composed text

        Raises:
            UpstreamError: If either upstream fails
        """
        if self._config.concurrent_double:
            todo, fact = await asyncio.gather(
                self.fetch_todo(todo_base_url),
                self.fetch_cat_fact(cats_base_url),
            )
        else:
            todo = await self.fetch_todo(todo_base_url)
            fact = await self.fetch_cat_fact(cats_base_url)
        return TextFormatter.format_double(todo, fact)

    async def handle_basic(self) -> str:
        """basic() against the configured to-do service"""
        return await self.basic(self._config.todo_url)

    async def handle_double(self) -> str:
        """double() against the configured services"""
        return await self.double(self._config.cats_url, self._config.todo_url)
