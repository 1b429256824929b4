#!/usr/bin/env python3
"""
main.py — Application entry point for the traffic light simulator
-----------------------------------------------------------------

Responsible for:
- loading configuration (config/config.yaml, factory defaults fallback)
- wiring dependencies (TrafficLight → TrafficLightController)
- installing SIGINT/SIGTERM handlers for graceful shutdown
- running the blocking signal cycle

Output:
    stdout carries one line per tick with the current message
    (PARA! / SEGUE AI / FICA LIGADO!); diagnostics go to stderr.
"""

import sys
from typing import Optional, TextIO

from controllers.traffic_light_controller import TrafficLightController
from engine.traffic_light import TrafficLight
from lifecycle import ShutdownCoordinator
from lifecycle.handlers import ControllerShutdownHandler
from managers.config_manager import ConfigManager
from utils.logger import get_logger, configure_logger, LogCategory

log = get_logger().for_category(LogCategory.SYSTEM)

STARTUP_MESSAGE = "Iniciando semáforo..."
SHUTDOWN_MESSAGE = "\nEncerrando o semáforo..."


def build_controller(config: ConfigManager, output: TextIO) -> TrafficLightController:
    """Create the signal state machine and its controller from loaded config"""
    traffic_light = TrafficLight(config.traffic_light_configuration)
    return TrafficLightController(traffic_light, output)


def main(
    controller: Optional[TrafficLightController] = None,
    output: Optional[TextIO] = None,
    config: Optional[ConfigManager] = None,
    coordinator: Optional[ShutdownCoordinator] = None,
) -> None:
    """
    Run the traffic light until interrupted.

    Args:
        controller: Pre-built controller (None = build from config)
        output: Stream for tick lines and start/stop messages (None = sys.stdout)
        config: Loaded ConfigManager (None = load config/config.yaml)
        coordinator: Shutdown coordinator (None = new instance)
    """
    output = output if output is not None else sys.stdout

    if controller is None:
        if config is None:
            config = ConfigManager()
            config.load()
        configure_logger(config.log_level, config.use_colors)
        controller = build_controller(config, output)

    coordinator = coordinator if coordinator is not None else ShutdownCoordinator()
    coordinator.register(ControllerShutdownHandler(controller))

    def exit_gracefully() -> None:
        print(SHUTDOWN_MESSAGE, file=output)
        sys.exit(0)

    coordinator.setup_signal_handlers(on_shutdown=exit_gracefully)

    print(STARTUP_MESSAGE, file=output)
    log.info("Traffic light ready")
    controller.start()


if __name__ == "__main__":
    main()
