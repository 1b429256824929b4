import sys
from io import StringIO
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from models.traffic_light_state import TrafficLightState
from managers.traffic_light_configuration import TrafficLightConfiguration
from utils.logger import get_logger, LogLevel


@pytest.fixture
def red_state():
    return TrafficLightState("vermelho", "PARA!", 15)


@pytest.fixture
def green_state():
    return TrafficLightState("verde", "SEGUE AI", 10)


@pytest.fixture
def yellow_state():
    return TrafficLightState("amarelo", "FICA LIGADO!", 5)


@pytest.fixture
def states(red_state, green_state, yellow_state):
    return [red_state, green_state, yellow_state]


@pytest.fixture
def mock_configuration(states, red_state):
    """
    Fake configuration: the three default states, red first.
    """
    configuration = MagicMock()
    configuration.states.return_value = states
    configuration.initial_state.return_value = red_state
    return configuration


@pytest.fixture
def fast_configuration():
    """Sub-second cycle for loop tests"""
    return TrafficLightConfiguration([
        TrafficLightState("vermelho", "PARA!", 0.01),
        TrafficLightState("verde", "SEGUE AI", 0.01),
        TrafficLightState("amarelo", "FICA LIGADO!", 0.01),
    ])


@pytest.fixture
def mock_traffic_light():
    light = MagicMock()
    light.message = "PARA!"
    light.duration = 0.1
    return light


@pytest.fixture
def output():
    return StringIO()


@pytest.fixture(autouse=True)
def quiet_logger():
    """Keep diagnostic logging out of test output"""
    logger = get_logger()
    saved = (logger.min_level, logger.use_colors, logger.stream)
    logger.min_level = LogLevel.ERROR
    logger.use_colors = False
    logger.stream = StringIO()
    yield logger
    logger.min_level, logger.use_colors, logger.stream = saved
