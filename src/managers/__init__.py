"""
Managers for configuration
"""

from .config_manager import ConfigManager
from .traffic_light_configuration import TrafficLightConfiguration, DEFAULT_CONFIGURATION

__all__ = ['ConfigManager', 'TrafficLightConfiguration', 'DEFAULT_CONFIGURATION']
