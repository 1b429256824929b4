"""
Test shutdown coordinator sequencing and signal wiring.
"""

import signal
from unittest.mock import MagicMock

import pytest

from lifecycle.shutdown_coordinator import ShutdownCoordinator
from lifecycle.handlers import ControllerShutdownHandler


class RecordingHandler:
    def __init__(self, name, priority, calls, fail=False):
        self.name = name
        self._priority = priority
        self.calls = calls
        self.fail = fail

    @property
    def shutdown_priority(self):
        return self._priority

    def shutdown(self):
        self.calls.append(self.name)
        if self.fail:
            raise RuntimeError(f"{self.name} failed")


@pytest.fixture
def installed(monkeypatch):
    """Capture handlers instead of touching the real process signals"""
    handlers = {}
    monkeypatch.setattr(signal, "signal", lambda sig, handler: handlers.__setitem__(sig, handler))
    return handlers


def test_register_rejects_incomplete_handler():
    coordinator = ShutdownCoordinator()

    with pytest.raises(ValueError, match="shutdown_priority"):
        coordinator.register(object())


def test_handlers_run_in_priority_order():
    calls = []
    coordinator = ShutdownCoordinator()
    coordinator.register(RecordingHandler("low", 10, calls))
    coordinator.register(RecordingHandler("high", 100, calls))
    coordinator.register(RecordingHandler("mid", 50, calls))

    coordinator.shutdown_all()

    assert calls == ["high", "mid", "low"]
    assert coordinator.is_shutdown_complete


def test_failing_handler_does_not_stop_sequence():
    calls = []
    coordinator = ShutdownCoordinator()
    coordinator.register(RecordingHandler("broken", 100, calls, fail=True))
    coordinator.register(RecordingHandler("next", 10, calls))

    coordinator.shutdown_all()

    assert calls == ["broken", "next"]


def test_shutdown_runs_once():
    calls = []
    coordinator = ShutdownCoordinator()
    coordinator.register(RecordingHandler("only", 1, calls))

    coordinator.shutdown_all()
    coordinator.shutdown_all()

    assert calls == ["only"]


def test_signal_handlers_installed_for_sigint_and_sigterm(installed):
    ShutdownCoordinator().setup_signal_handlers()
    assert set(installed) == {signal.SIGINT, signal.SIGTERM}


def test_signal_triggers_shutdown_then_callback(installed):
    order = []
    controller = MagicMock()
    controller.stop.side_effect = lambda: order.append("stop")

    coordinator = ShutdownCoordinator()
    coordinator.register(ControllerShutdownHandler(controller))
    coordinator.setup_signal_handlers(on_shutdown=lambda: order.append("exit"))

    installed[signal.SIGTERM](signal.SIGTERM, None)

    assert order == ["stop", "exit"]
    assert coordinator.shutdown_reason == "SIGTERM"


def test_controller_handler_priority():
    handler = ControllerShutdownHandler(MagicMock())
    assert handler.shutdown_priority == 100


def test_repeated_signal_skips_callback(installed):
    controller = MagicMock()
    on_shutdown = MagicMock()

    coordinator = ShutdownCoordinator()
    coordinator.register(ControllerShutdownHandler(controller))
    coordinator.setup_signal_handlers(on_shutdown=on_shutdown)

    installed[signal.SIGINT](signal.SIGINT, None)
    installed[signal.SIGINT](signal.SIGINT, None)
    installed[signal.SIGTERM](signal.SIGTERM, None)

    on_shutdown.assert_called_once_with()
    controller.stop.assert_called_once_with()
    assert coordinator.shutdown_reason == "SIGINT"
