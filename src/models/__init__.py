"""
Models package - Data models for the traffic light simulator
"""

from .enums import TrafficLightColor, LogLevel, LogCategory
from .traffic_light_state import TrafficLightState

__all__ = [
    'TrafficLightColor',
    'LogLevel',
    'LogCategory',
    'TrafficLightState',
]
