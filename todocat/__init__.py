"""
todocat Package

A small HTTP server that fans out to a to-do service and a cat fact service,
extracts one field from each JSON answer and returns a composed plain text
result.

Architecture:
- Facade Pattern for the fan-out service
- Value Object Pattern for configuration and decoded records
- One shared async HTTP client for all outbound calls
"""

from .models import ServerConfig, TodoItem, CatFact
from .parsers import ResponseParser, decode_todo, decode_cat_fact
from .clients import UpstreamClient, build_async_client, todo_url, cats_url
from .formatters import TextFormatter
from .services import FanoutService
from .exceptions import (
    UpstreamError,
    NetworkError,
    DecodeError,
    UpstreamStatusError,
    RequestBuildError,
)

__all__ = [
    # Models
    "ServerConfig",
    "TodoItem",
    "CatFact",
    # Parsers
    "ResponseParser",
    "decode_todo",
    "decode_cat_fact",
    # Clients
    "UpstreamClient",
    "build_async_client",
    "todo_url",
    "cats_url",
    # Formatters
    "TextFormatter",
    # Services
    "FanoutService",
    # Errors
    "UpstreamError",
    "NetworkError",
    "DecodeError",
    "UpstreamStatusError",
    "RequestBuildError",
]
