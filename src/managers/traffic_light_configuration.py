"""
Traffic Light Configuration - Ordered signal states

Holds the fixed cycle of states and its designated initial state.
Does NOT load files - ConfigManager builds instances from YAML data.
"""

from typing import Any, Dict, Iterable, Optional, Tuple

from models.enums import TrafficLightColor
from models.traffic_light_state import TrafficLightState
from utils.enum_helper import EnumHelper


class TrafficLightConfiguration:
    """
    Ordered, read-only sequence of signal states

    Example:
        config = TrafficLightConfiguration()
        config.states()          # (vermelho, verde, amarelo)
        config.initial_state()   # vermelho / PARA! / 15s

        fast = TrafficLightConfiguration([
            TrafficLightState("vermelho", "PARA!", 0.1),
            TrafficLightState("verde", "SEGUE AI", 0.1),
        ])
    """

    DEFAULT_STATES: Tuple[TrafficLightState, ...] = (
        TrafficLightState(TrafficLightColor.VERMELHO, "PARA!", 15),
        TrafficLightState(TrafficLightColor.VERDE, "SEGUE AI", 10),
        TrafficLightState(TrafficLightColor.AMARELO, "FICA LIGADO!", 5),
    )

    def __init__(
        self,
        states: Optional[Iterable[TrafficLightState]] = None,
        initial_state: Optional[TrafficLightState] = None,
    ):
        """
        Args:
            states: Ordered states of one full cycle (None = DEFAULT_STATES)
            initial_state: State the signal starts and resets to (None = first state)

        Raises:
            ValueError: If the state sequence is empty
        """
        self._states = tuple(states) if states is not None else self.DEFAULT_STATES
        if not self._states:
            raise ValueError("traffic light configuration requires at least one state")
        self._initial_state = initial_state if initial_state is not None else self._states[0]

    def states(self) -> Tuple[TrafficLightState, ...]:
        """Return the configured states in cycle order"""
        return self._states

    def initial_state(self) -> TrafficLightState:
        """Return the state the signal starts in"""
        return self._initial_state

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TrafficLightConfiguration":
        """
        Build a configuration from the 'traffic_light' config section

        Args:
            data: Example: {
                      'states': [
                          {'color': 'vermelho', 'message': 'PARA!', 'duration': 15},
                          ...
                      ],
                      'initial': 'vermelho'
                  }

        Raises:
            ValueError: If states are missing/invalid or 'initial' names an unknown color
        """
        raw_states = data.get("states")
        if not raw_states:
            raise ValueError("traffic_light.states must list at least one state")

        states = [TrafficLightState.from_dict(item) for item in raw_states]

        initial_color = data.get("initial")
        if initial_color is not None:
            label = EnumHelper.to_label(initial_color)
            start = next((i for i, s in enumerate(states) if s.color == label), None)
            if start is None:
                raise ValueError(f"Unknown initial state color: {label}")
            # Initial state must sit at index 0 so the cycle order is preserved
            states = states[start:] + states[:start]

        return cls(states)

    def __repr__(self) -> str:
        colors = ", ".join(state.color for state in self._states)
        return f"TrafficLightConfiguration([{colors}])"


DEFAULT_CONFIGURATION = TrafficLightConfiguration()
