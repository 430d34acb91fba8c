"""
Parser utilities for decoding upstream responses.
"""

from .response_parser import ResponseParser, decode_todo, decode_cat_fact

__all__ = ['ResponseParser', 'decode_todo', 'decode_cat_fact']
