"""
Engine - signal state machine
"""

from .traffic_light import TrafficLight

__all__ = ['TrafficLight']
