"""
Output formatters for response bodies.
"""

from .text_formatter import TextFormatter

__all__ = ['TextFormatter']
