"""
Shutdown handler protocol for component-based graceful shutdown.

Each component that needs cleanup implements IShutdownHandler to participate
in the graceful shutdown sequence.
"""

from typing import Protocol


class IShutdownHandler(Protocol):
    """
    Protocol for components that need graceful shutdown.

    The ShutdownCoordinator will call shutdown() on each handler in
    priority order.

    Example:
        class ControllerShutdownHandler:
            @property
            def shutdown_priority(self) -> int:
                return 100  # Shutdown first

            def shutdown(self) -> None:
                self.controller.stop()
    """

    @property
    def shutdown_priority(self) -> int:
        """
        Higher priority shuts down earlier.
        """
        ...

    def shutdown(self) -> None:
        """
        Called during coordinated shutdown.
        """
        ...
