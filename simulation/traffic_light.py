"""
Signal-Cycle – Traffic Light States & Rules
Phase enumeration, sequence table, phase durations, and lamp projections.
Nothing in here draws or keeps time.
"""

from dataclasses import dataclass, replace
from enum import Enum

from config.settings import (
    MIN_DURATION, MAX_DURATION,
    DEFAULT_RED_SECONDS, DEFAULT_GREEN_SECONDS, DEFAULT_AMBER_SECONDS,
    DEFAULT_UK_SEQUENCE,
)


class TrafficLightState(Enum):
    RED = "RED"
    RED_AMBER = "RED_AMBER"   # UK only: prepare to go
    GREEN = "GREEN"
    AMBER = "AMBER"


# ─────────────────────────────────────────────
# Configuration
# ─────────────────────────────────────────────
def parse_safely(text, default: int) -> int:
    """Parse operator text as an int, falling back to ``default``."""
    try:
        return int(str(text).strip())
    except (TypeError, ValueError):
        return default


def clamp_duration(value: int) -> int:
    """Constrain a duration to [MIN_DURATION, MAX_DURATION]."""
    return max(MIN_DURATION, min(MAX_DURATION, value))


@dataclass(frozen=True)
class TrafficLightConfig:
    """
    Phase timings (seconds) and the sequence variant.

    Values built directly are taken as-is; use ``from_user_input`` for
    anything typed by an operator.
    """

    red_seconds: int = DEFAULT_RED_SECONDS
    green_seconds: int = DEFAULT_GREEN_SECONDS
    amber_seconds: int = DEFAULT_AMBER_SECONDS
    use_uk_sequence: bool = DEFAULT_UK_SEQUENCE

    @classmethod
    def from_user_input(cls, red_text, green_text, amber_text,
                        use_uk_sequence: bool = DEFAULT_UK_SEQUENCE) -> "TrafficLightConfig":
        return cls(
            red_seconds=clamp_duration(parse_safely(red_text, DEFAULT_RED_SECONDS)),
            green_seconds=clamp_duration(parse_safely(green_text, DEFAULT_GREEN_SECONDS)),
            amber_seconds=clamp_duration(parse_safely(amber_text, DEFAULT_AMBER_SECONDS)),
            use_uk_sequence=bool(use_uk_sequence),
        )

    def with_changes(self, **changes) -> "TrafficLightConfig":
        return replace(self, **changes)


# ─────────────────────────────────────────────
# Sequence rules
# ─────────────────────────────────────────────
UK_SEQUENCE = {
    TrafficLightState.RED: TrafficLightState.RED_AMBER,
    TrafficLightState.RED_AMBER: TrafficLightState.GREEN,
    TrafficLightState.GREEN: TrafficLightState.AMBER,
    TrafficLightState.AMBER: TrafficLightState.RED,
}

SIMPLE_SEQUENCE = {
    TrafficLightState.RED: TrafficLightState.GREEN,
    # left over from a switch mid-cycle: it was about to go green anyway
    TrafficLightState.RED_AMBER: TrafficLightState.GREEN,
    TrafficLightState.GREEN: TrafficLightState.AMBER,
    TrafficLightState.AMBER: TrafficLightState.RED,
}


def next_state(current: TrafficLightState, use_uk_sequence: bool) -> TrafficLightState:
    """
    UK:     RED → RED_AMBER → GREEN → AMBER → RED
    Simple: RED → GREEN → AMBER → RED
    """
    table = UK_SEQUENCE if use_uk_sequence else SIMPLE_SEQUENCE
    return table[current]


def duration_for_state(state: TrafficLightState, config: TrafficLightConfig) -> int:
    """Seconds to hold ``state``. RED_AMBER is brief, like AMBER."""
    if state == TrafficLightState.RED:
        return config.red_seconds
    elif state == TrafficLightState.GREEN:
        return config.green_seconds
    return config.amber_seconds


# ─────────────────────────────────────────────
# Lamp projections
# ─────────────────────────────────────────────
def is_red_on(state: TrafficLightState) -> bool:
    return state in (TrafficLightState.RED, TrafficLightState.RED_AMBER)


def is_amber_on(state: TrafficLightState) -> bool:
    return state in (TrafficLightState.AMBER, TrafficLightState.RED_AMBER)


def is_green_on(state: TrafficLightState) -> bool:
    return state == TrafficLightState.GREEN


def lamp_states(state: TrafficLightState) -> tuple:
    """(red, amber, green) – which physical lamps are energised."""
    return is_red_on(state), is_amber_on(state), is_green_on(state)
