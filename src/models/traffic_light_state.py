"""Traffic light state value object"""

import math
from dataclasses import dataclass
from typing import Any, Dict

from utils.enum_helper import EnumHelper


@dataclass(frozen=True)
class TrafficLightState:
    """
    One phase of the signal: color label, display message and duration.

    Immutable and validated on construction - an instance with an empty
    color, empty message or non-positive duration can never exist.
    Equality and hash are structural over (color, message, duration).

    Example:
        red = TrafficLightState("vermelho", "PARA!", 15)
        str(red)        # "VERMELHO: PARA!"
        red.duration    # 15.0
    """
    color: str
    message: str
    duration: float

    def __post_init__(self):
        color = self._normalize_label(self.color)
        message = self._normalize_label(self.message)

        if not color:
            raise ValueError("color cannot be None or empty")
        if not message:
            raise ValueError("message cannot be None or empty")

        try:
            duration = float(self.duration)
        except (TypeError, ValueError):
            raise ValueError("duration must be positive") from None
        if not math.isfinite(duration) or duration <= 0:
            raise ValueError("duration must be positive")

        # Frozen dataclass: normalized values must bypass __setattr__
        object.__setattr__(self, "color", color)
        object.__setattr__(self, "message", message)
        object.__setattr__(self, "duration", duration)

    @staticmethod
    def _normalize_label(value: Any) -> str:
        if value is None:
            return ""
        return EnumHelper.to_label(value)

    def __str__(self) -> str:
        return f"{self.color.upper()}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the mapping form used in config YAML"""
        return {
            "color": self.color,
            "message": self.message,
            "duration": self.duration,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TrafficLightState":
        """
        Build a state from a config mapping.

        Args:
            data: Mapping with 'color', 'message' and 'duration' keys

        Raises:
            ValueError: If a key is missing or a value is invalid
        """
        missing = [key for key in ("color", "message", "duration") if key not in data]
        if missing:
            raise ValueError(f"state definition missing keys: {', '.join(missing)}")
        return cls(data["color"], data["message"], data["duration"])
