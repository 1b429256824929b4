from .traffic_light_controller import TrafficLightController

__all__ = [
    'TrafficLightController',
]
