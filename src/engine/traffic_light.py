"""
TrafficLight - cyclic signal state machine

Holds the ordered states of a configuration and a cursor into them.
The machine never halts on its own; TrafficLightController decides when to stop.
"""

from typing import Any, Optional, Tuple

from models.traffic_light_state import TrafficLightState
from managers.traffic_light_configuration import DEFAULT_CONFIGURATION
from utils.enum_helper import EnumHelper
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.STATE)


class TrafficLight:
    """
    Cyclic state machine over a configuration's states

    Transitions are successor-only: vermelho → verde → amarelo → vermelho ...
    The configuration collaborator only needs states() and initial_state().

    Example:
        light = TrafficLight()
        light.message        # "PARA!"
        light.advance()
        light.color          # "verde"
        light.in_state("verde")  # True
        light.reset()
    """

    def __init__(self, configuration: Optional[Any] = None):
        """
        Args:
            configuration: Object exposing states() and initial_state()
                           (None = built-in DEFAULT_CONFIGURATION)

        Raises:
            ValueError: If the configuration has no states
        """
        self._configuration = configuration if configuration is not None else DEFAULT_CONFIGURATION
        self._states = tuple(self._configuration.states())
        if not self._states:
            raise ValueError("traffic light requires at least one state")

        self._current_index = 0
        self._current_state = self._configuration.initial_state()

    # ===== State access =====

    @property
    def states(self) -> Tuple[TrafficLightState, ...]:
        return self._states

    @property
    def current_state(self) -> TrafficLightState:
        return self._current_state

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def color(self) -> str:
        return self._current_state.color

    @property
    def message(self) -> str:
        return self._current_state.message

    @property
    def duration(self) -> float:
        return self._current_state.duration

    current_color = color
    current_message = message
    current_duration = duration

    # ===== Transitions =====

    def advance(self) -> TrafficLightState:
        """Move to the next state, wrapping from the last back to the first"""
        self._current_index = (self._current_index + 1) % len(self._states)
        self._current_state = self._states[self._current_index]
        return self._current_state

    def reset(self) -> None:
        """Return to the configuration's initial state"""
        self._current_index = 0
        self._current_state = self._configuration.initial_state()
        log.debug("Signal reset", state=str(self._current_state))

    def in_state(self, color_name: Any) -> bool:
        """Check current color against a str or TrafficLightColor"""
        return self.color == EnumHelper.to_label(color_name)

    def __repr__(self) -> str:
        return f"TrafficLight(current={self._current_state!s}, index={self._current_index})"
