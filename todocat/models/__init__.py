"""
Data models and value objects.
"""

from .server_config import ServerConfig
from .todo_item import TodoItem
from .cat_fact import CatFact

__all__ = ['ServerConfig', 'TodoItem', 'CatFact']
