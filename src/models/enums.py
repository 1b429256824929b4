"""
Enums for the traffic light state machine
"""

from enum import Enum, auto


class TrafficLightColor(Enum):
    """
    Built-in signal colors

    Values are the color labels used by the default configuration, so a
    member can be passed anywhere a color name is expected
    (e.g. TrafficLight.in_state(TrafficLightColor.VERMELHO)).
    """
    VERMELHO = "vermelho"   # red - stop
    VERDE = "verde"         # green - go
    AMARELO = "amarelo"     # yellow - attention


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    STATE = auto()       # State machine resets, queries
    TRANSITION = auto()  # Advancing to the next signal state
    SYSTEM = auto()      # Startup, shutdown, errors
    SHUTDOWN = auto()

    GENERAL = auto()    # Default general category
