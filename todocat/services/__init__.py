"""
Business logic services.
"""

from .fanout_service import FanoutService

__all__ = ['FanoutService']
