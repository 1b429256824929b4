"""
Unit tests for the TrafficLight state machine
"""

import pytest

from engine.traffic_light import TrafficLight
from managers.traffic_light_configuration import TrafficLightConfiguration, DEFAULT_CONFIGURATION
from models.enums import TrafficLightColor
from models.traffic_light_state import TrafficLightState


@pytest.fixture
def light(mock_configuration):
    return TrafficLight(mock_configuration)


def test_starts_in_initial_state(light, red_state, states):
    assert light.current_state == red_state
    assert light.current_index == 0
    assert light.states == tuple(states)


def test_uses_default_configuration():
    light = TrafficLight()

    assert light.states == DEFAULT_CONFIGURATION.states()
    assert light.current_state == DEFAULT_CONFIGURATION.initial_state()


def test_pass_through_accessors(light):
    assert light.color == "vermelho"
    assert light.message == "PARA!"
    assert light.duration == 15
    assert light.current_color == "vermelho"
    assert light.current_message == "PARA!"
    assert light.current_duration == 15


def test_default_sequence_wraps_to_red():
    light = TrafficLight()

    assert light.current_state == TrafficLightState("vermelho", "PARA!", 15)
    assert light.advance() == TrafficLightState("verde", "SEGUE AI", 10)
    assert light.advance() == TrafficLightState("amarelo", "FICA LIGADO!", 5)
    assert light.advance() == TrafficLightState("vermelho", "PARA!", 15)
    assert light.current_index == 0


@pytest.mark.parametrize("start", [0, 1, 2])
@pytest.mark.parametrize("cycles", [0, 1, 4])
def test_full_cycles_return_to_start(light, start, cycles):
    for _ in range(start):
        light.advance()
    expected = light.current_state

    for _ in range(len(light.states) * cycles):
        light.advance()

    assert light.current_state == expected


def test_single_state_cycles_onto_itself(red_state):
    light = TrafficLight(TrafficLightConfiguration([red_state]))

    light.advance()
    assert light.current_state == red_state
    assert light.current_index == 0


def test_reset_restores_initial_state(light, red_state):
    for _ in range(5):
        light.advance()

    light.reset()
    assert light.current_state == red_state
    assert light.current_index == 0

    light.reset()
    assert light.current_state == red_state


def test_reset_uses_configuration_initial_state(states, yellow_state):
    light = TrafficLight(TrafficLightConfiguration(states, initial_state=yellow_state))
    light.advance()

    light.reset()
    assert light.current_state == yellow_state
    assert light.current_index == 0


def test_in_state(light):
    assert light.in_state("vermelho") is True
    assert light.in_state("verde") is False
    assert light.in_state(TrafficLightColor.VERMELHO) is True

    light.advance()
    assert light.in_state(TrafficLightColor.VERDE) is True


def test_in_state_has_no_side_effects(light, red_state):
    light.in_state("verde")
    assert light.current_state == red_state


def test_empty_configuration_rejected(mock_configuration):
    mock_configuration.states.return_value = []

    with pytest.raises(ValueError, match="at least one state"):
        TrafficLight(mock_configuration)
