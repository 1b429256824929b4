from __future__ import annotations

from typing import TYPE_CHECKING

from lifecycle.shutdown_protocol import IShutdownHandler
from utils.logger import get_logger, LogCategory

if TYPE_CHECKING:
    from controllers.traffic_light_controller import TrafficLightController

log = get_logger().for_category(LogCategory.SHUTDOWN)


class ControllerShutdownHandler(IShutdownHandler):
    """
    Shutdown handler for the traffic light controller.

    Stops the display loop; the pause in progress is woken immediately.

    Priority: 100 (runs first)
    """

    def __init__(self, controller: TrafficLightController):
        self.controller = controller

    @property
    def shutdown_priority(self) -> int:
        return 100

    def shutdown(self) -> None:
        """Stop the signal cycle."""
        log.info("Stopping traffic light controller...")
        self.controller.stop()
