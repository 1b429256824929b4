"""
Shutdown coordinator that orchestrates graceful shutdown of all components.

Manages signal handlers, shutdown sequencing, and error handling across
multiple shutdown handlers in priority order.
"""

import signal
from typing import Callable, List, Optional
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SHUTDOWN)


class ShutdownCoordinator:
    """
    Coordinates graceful shutdown of multiple components.

    Maintains a list of shutdown handlers and executes them in priority order
    when shutdown is triggered by SIGINT/SIGTERM or an explicit call.

    Example:
        coordinator = ShutdownCoordinator()
        coordinator.register(ControllerShutdownHandler(controller))

        coordinator.setup_signal_handlers(on_shutdown=lambda: sys.exit(0))
        controller.start()
    """

    SIGNALS = (signal.SIGINT, signal.SIGTERM)

    def __init__(self):
        self._handlers: List = []
        self._shutdown_reason: Optional[str] = None
        self._completed = False

    @property
    def shutdown_reason(self) -> Optional[str]:
        return self._shutdown_reason

    @property
    def is_shutdown_complete(self) -> bool:
        return self._completed

    def register(self, handler) -> None:
        """
        Register a shutdown handler.

        Handler must have:
        - shutdown_priority property (int)
        - shutdown() method

        Args:
            handler: Object implementing IShutdownHandler protocol
        """
        if not hasattr(handler, "shutdown_priority"):
            raise ValueError(f"Handler {handler} missing shutdown_priority property")
        if not callable(getattr(handler, "shutdown", None)):
            raise ValueError(f"Handler {handler} missing shutdown() method")

        self._handlers.append(handler)
        log.debug(f"Registered shutdown handler: {handler.__class__.__name__}")

    def setup_signal_handlers(self, on_shutdown: Optional[Callable[[], None]] = None) -> None:
        """
        Install OS signal handlers for graceful shutdown.

        Registers SIGINT (Ctrl+C) and SIGTERM. The handler runs shutdown_all()
        and then on_shutdown (typically printing a farewell and exiting).

        Args:
            on_shutdown: Callback invoked after all handlers ran
        """
        def signal_handler(signum, frame) -> None:
            sig = signal.Signals(signum)
            if self._completed:
                log.debug(f"Signal {sig.name} received during shutdown, ignoring")
                return
            self._shutdown_reason = sig.name
            log.info(f"Signal {sig.name} received → triggering shutdown")
            self.shutdown_all()
            if on_shutdown is not None:
                on_shutdown()

        for sig in self.SIGNALS:
            signal.signal(sig, signal_handler)

        log.debug("Signal handlers installed (SIGINT, SIGTERM)")

    def shutdown_all(self) -> None:
        """
        Execute graceful shutdown of all handlers in priority order.

        Handlers are called in descending priority order (highest first).
        A failing handler is logged and the sequence continues.
        Runs at most once; later calls are ignored.
        """
        if self._completed:
            log.debug("Shutdown already complete, ignoring")
            return
        self._completed = True

        log.info("Initiating graceful shutdown sequence...", reason=self._shutdown_reason or "REQUESTED")

        sorted_handlers = sorted(
            self._handlers, key=lambda h: h.shutdown_priority, reverse=True
        )

        for handler in sorted_handlers:
            handler_name = handler.__class__.__name__
            try:
                log.debug(f"Shutting down {handler_name} (priority={handler.shutdown_priority})...")
                handler.shutdown()
                log.debug(f"✓ {handler_name} shutdown complete")
            except Exception as e:
                log.error(f"Error shutting down {handler_name}: {e}")
                # Continue with other handlers even if one fails

        log.info("Shutdown sequence complete")
