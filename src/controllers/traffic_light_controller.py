"""TrafficLightController - timed display loop for the signal"""

from __future__ import annotations

import math
import sys
import threading
from typing import Any, Callable, Optional, TextIO

from engine.traffic_light import TrafficLight
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SYSTEM)


class TrafficLightController:
    """
    Drives a TrafficLight in a loop until stopped

    Responsibilities:
    - Display the current message once per tick (one line per tick)
    - Spread the state's duration evenly over its ticks
    - Advance the signal after each full state
    - Cooperative stop between ticks, with the pause itself interruptible

    Example:
        controller = TrafficLightController()
        controller.start()   # blocks until stop() is called
    """

    DISPLAY_INTERVAL = 1  # second

    def __init__(
        self,
        traffic_light: Optional[Any] = None,
        output: Optional[TextIO] = None,
        sleep: Optional[Callable[[float], Any]] = None,
    ):
        """
        Initialize controller with dependency injection.

        Args:
            traffic_light: Object exposing message, duration and advance()
                           (None = new TrafficLight with built-in states)
            output: Text stream receiving one line per tick (None = sys.stdout)
            sleep: Pause function taking seconds (None = wait that stop() interrupts)
        """
        self.traffic_light = traffic_light if traffic_light is not None else TrafficLight()
        self.output = output if output is not None else sys.stdout
        self._sleep = sleep
        self._running = threading.Event()
        self._wakeup = threading.Event()

    def start(self) -> None:
        """Run the signal cycle until stop() is called"""
        self._wakeup.clear()
        self._running.set()
        log.info("Traffic light cycle started")
        self._run_cycle()

    def stop(self) -> None:
        """Stop the cycle; safe to call from a signal handler or another thread"""
        was_running = self._running.is_set()
        self._running.clear()
        self._wakeup.set()
        if was_running:
            log.info("Traffic light cycle stopped")

    def is_running(self) -> bool:
        return self._running.is_set()

    # ===== Cycle =====

    def _run_cycle(self) -> None:
        while self.is_running():
            self._execute_current_state()
            self._transition_to_next_state()

    def _execute_current_state(self) -> None:
        """Display the current message for the state's duration"""
        duration = self.traffic_light.duration
        ticks = self._tick_count(duration)
        interval = duration / ticks

        for _ in range(ticks):
            if not self.is_running():
                break
            self._display_current_state()
            self._pause(interval)

    def _tick_count(self, duration: float) -> int:
        # Sub-second durations still get one display + pause
        return max(math.floor(duration / self.DISPLAY_INTERVAL), 1)

    def _transition_to_next_state(self) -> None:
        if not self.is_running():
            return
        state = self.traffic_light.advance()
        log.debug("Advanced signal", category=LogCategory.TRANSITION, state=state)

    def _display_current_state(self) -> None:
        self.output.write(f"{self.traffic_light.message}\n")
        flush = getattr(self.output, "flush", None)
        if flush is not None:
            flush()

    def _pause(self, seconds: float) -> None:
        if self._sleep is not None:
            self._sleep(seconds)
        else:
            self._wakeup.wait(seconds)
