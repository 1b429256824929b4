from .controller_shutdown_handler import ControllerShutdownHandler

__all__ = [
    "ControllerShutdownHandler",
]
