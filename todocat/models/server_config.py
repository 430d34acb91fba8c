"""
Server configuration model - Value Object pattern.
Immutable settings shared read-only by every request.
"""

from dataclasses import dataclass
from typing import Optional

from ..config import AppConfig, FeatureFlags


@dataclass(frozen=True)
class ServerConfig:
    """
    Immutable server configuration.

    Attributes:
        todo_url: Base URL of the to-do service
        cats_url: Base URL of the cat fact service
        host: Address to listen on
        port: Port to listen on
        upstream_timeout: Seconds before an upstream call is abandoned (None = never)
        concurrent_double: Fetch both upstreams at once in /double
    """
    todo_url: str
    cats_url: str
    host: str = "127.0.0.1"
    port: int = 3000
    upstream_timeout: Optional[float] = None
    concurrent_double: bool = False

    def __post_init__(self):
        """Validate invariants"""
        if not self.todo_url:
            raise ValueError("To-do service URL cannot be empty")
        if not self.cats_url:
            raise ValueError("Cat fact service URL cannot be empty")

    @classmethod
    def from_app_config(cls,
                        todo_url: Optional[str] = None,
                        cats_url: Optional[str] = None,
                        host: Optional[str] = None,
                        port: Optional[int] = None) -> 'ServerConfig':
        """
        Create ServerConfig from AppConfig, with optional overrides.

        Args:
            todo_url: Override for AppConfig.TODO_URL
            cats_url: Override for AppConfig.CATS_URL
            host: Override for AppConfig.HOST
            port: Override for AppConfig.PORT

        Returns:
            ServerConfig instance
        """
        return cls(
            todo_url=todo_url or AppConfig.TODO_URL,
            cats_url=cats_url or AppConfig.CATS_URL,
            host=host if host is not None else AppConfig.HOST,
            port=port if port is not None else AppConfig.PORT,
            upstream_timeout=AppConfig.UPSTREAM_TIMEOUT,
            concurrent_double=FeatureFlags.CONCURRENT_DOUBLE
        )
