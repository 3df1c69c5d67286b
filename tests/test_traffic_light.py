"""
Signal-Cycle – Sequence Rule & Configuration Tests
═══════════════════════════════════════════════════
Transition tables, phase durations, lamp projections, and operator
input parsing.

Run: python -m pytest tests/test_traffic_light.py -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import dataclasses
import pytest

from config.settings import MIN_DURATION, MAX_DURATION
from simulation.traffic_light import (
    TrafficLightState,
    TrafficLightConfig,
    next_state,
    duration_for_state,
    is_red_on,
    is_amber_on,
    is_green_on,
    lamp_states,
    parse_safely,
    clamp_duration,
)

RED = TrafficLightState.RED
RED_AMBER = TrafficLightState.RED_AMBER
GREEN = TrafficLightState.GREEN
AMBER = TrafficLightState.AMBER


# ═══════════════════════════════════════════
# Transition table
# ═══════════════════════════════════════════

def test_uk_sequence_order():
    seq = [RED]
    for _ in range(4):
        seq.append(next_state(seq[-1], True))
    assert seq == [RED, RED_AMBER, GREEN, AMBER, RED]


def test_simple_sequence_order():
    seq = [RED]
    for _ in range(3):
        seq.append(next_state(seq[-1], False))
    assert seq == [RED, GREEN, AMBER, RED]


def test_simple_sequence_recovers_from_red_amber():
    """RED_AMBER left over from a mid-cycle switch heads to GREEN."""
    assert next_state(RED_AMBER, False) == GREEN


@pytest.mark.parametrize("use_uk", [True, False])
@pytest.mark.parametrize("state", list(TrafficLightState))
def test_next_state_is_total_and_deterministic(state, use_uk):
    first = next_state(state, use_uk)
    assert isinstance(first, TrafficLightState)
    assert next_state(state, use_uk) == first


def test_simple_sequence_never_enters_red_amber():
    for state in TrafficLightState:
        assert next_state(state, False) != RED_AMBER


# ═══════════════════════════════════════════
# Durations
# ═══════════════════════════════════════════

def test_duration_for_each_state():
    cfg = TrafficLightConfig(red_seconds=10, green_seconds=8, amber_seconds=3)
    assert duration_for_state(RED, cfg) == 10
    assert duration_for_state(GREEN, cfg) == 8
    assert duration_for_state(AMBER, cfg) == 3


def test_red_amber_shares_amber_duration():
    for amber in (1, 2, 7, 60):
        cfg = TrafficLightConfig(amber_seconds=amber)
        assert duration_for_state(RED_AMBER, cfg) == duration_for_state(AMBER, cfg) == amber


# ═══════════════════════════════════════════
# Lamp projections
# ═══════════════════════════════════════════

def test_lamp_table():
    assert lamp_states(RED) == (True, False, False)
    assert lamp_states(RED_AMBER) == (True, True, False)
    assert lamp_states(GREEN) == (False, False, True)
    assert lamp_states(AMBER) == (False, True, False)


def test_every_state_lights_at_least_one_lamp():
    for state in TrafficLightState:
        assert is_red_on(state) or is_amber_on(state) or is_green_on(state)


def test_only_red_amber_lights_two_lamps():
    doubles = [s for s in TrafficLightState if sum(lamp_states(s)) == 2]
    assert doubles == [RED_AMBER]


# ═══════════════════════════════════════════
# Configuration parsing
# ═══════════════════════════════════════════

def test_default_config():
    cfg = TrafficLightConfig()
    assert (cfg.red_seconds, cfg.green_seconds, cfg.amber_seconds) == (6, 6, 2)
    assert cfg.use_uk_sequence is True


@pytest.mark.parametrize("text, expected", [
    ("7", 7),
    (" 12 ", 12),
    ("-4", -4),
    ("abc", 99),
    ("", 99),
    ("2.5", 99),
    (None, 99),
])
def test_parse_safely(text, expected):
    assert parse_safely(text, 99) == expected


def test_clamp_duration():
    assert clamp_duration(0) == MIN_DURATION
    assert clamp_duration(-10) == MIN_DURATION
    assert clamp_duration(100) == MAX_DURATION
    assert clamp_duration(5) == 5
    assert clamp_duration(1) == 1
    assert clamp_duration(60) == 60


def test_from_user_input_uses_defaults_and_clamps():
    cfg = TrafficLightConfig.from_user_input("abc", "0", "999", False)
    assert cfg.red_seconds == 6       # unparseable → default
    assert cfg.green_seconds == 1     # clamped up
    assert cfg.amber_seconds == 60    # clamped down
    assert cfg.use_uk_sequence is False


def test_from_user_input_valid_values():
    cfg = TrafficLightConfig.from_user_input("10", "20", "3", True)
    assert cfg == TrafficLightConfig(10, 20, 3, True)


def test_config_is_immutable():
    cfg = TrafficLightConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.red_seconds = 30


def test_with_changes_returns_copy():
    cfg = TrafficLightConfig()
    simple = cfg.with_changes(use_uk_sequence=False)
    assert simple.use_uk_sequence is False
    assert cfg.use_uk_sequence is True
    assert simple.red_seconds == cfg.red_seconds


def test_direct_config_is_not_validated():
    cfg = TrafficLightConfig(red_seconds=0, green_seconds=-5, amber_seconds=500)
    assert duration_for_state(RED, cfg) == 0
    assert duration_for_state(GREEN, cfg) == -5
    assert duration_for_state(AMBER, cfg) == 500
