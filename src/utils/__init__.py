"""
Utility functions for the traffic light simulator
"""

from .enum_helper import EnumHelper

__all__ = [
    'EnumHelper',
]
