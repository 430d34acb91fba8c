"""
Outbound HTTP: the shared upstream client and endpoint URL builders.
"""

from .upstream_client import UpstreamClient, build_async_client
from .urls import todo_url, cats_url

__all__ = ['UpstreamClient', 'build_async_client', 'todo_url', 'cats_url']
