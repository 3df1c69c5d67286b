"""
Signal-Cycle – Fixed-Timer Controller
Owns the signal's phase and countdown; advanced by caller-supplied
elapsed time. No clock, no I/O, no drawing.
"""

from dataclasses import dataclass
from datetime import timedelta

from simulation.traffic_light import (
    TrafficLightState, TrafficLightConfig,
    next_state, duration_for_state, lamp_states,
)
from config.settings import ONE_SECOND_MS


@dataclass(frozen=True)
class ControllerSnapshot:
    state: TrafficLightState
    remaining_seconds: int
    is_running: bool
    has_started: bool
    elapsed_ms: float


class TimerController:
    """
    Cycles the signal on a fixed timer:

        UK:     RED → RED_AMBER → GREEN → AMBER → repeat
        Simple: RED → GREEN → AMBER → repeat

    The driver calls ``advance`` with however much time has passed
    (every 250 ms in the GUI). Sub-second remainders are carried
    between calls; the countdown only moves on whole seconds.
    """

    def __init__(self):
        self.state = TrafficLightState.RED
        self.remaining_seconds = 0
        self.is_running = False
        self.has_started = False
        self._elapsed_ms = 0.0

    # ── control surface ──────────────────
    def start(self, config: TrafficLightConfig):
        """Begin (or restart) the cycle from RED."""
        self._enter(TrafficLightState.RED, config)
        self.is_running = True
        self.has_started = True

    def pause(self):
        self.is_running = False

    def resume(self):
        # nothing to resume before the first start
        if self.has_started:
            self.is_running = True

    def step(self, config: TrafficLightConfig):
        """Force exactly one transition, running or not."""
        self.has_started = True
        self._enter(next_state(self.state, config.use_uk_sequence), config)

    def reset(self, config: TrafficLightConfig):
        """Back to RED, stopped, as if never started."""
        self._enter(TrafficLightState.RED, config)
        self.is_running = False
        self.has_started = False

    # ── timer-driven tick ────────────────
    def advance(self, elapsed, config: TrafficLightConfig) -> list:
        """
        Consume ``elapsed`` (milliseconds, or a timedelta).

        Returns the states entered during this call, in order. A large
        delta catches up through as many phases as it spans.
        """
        if not self.is_running:
            return []

        if isinstance(elapsed, timedelta):
            elapsed = elapsed.total_seconds() * 1000.0
        self._elapsed_ms += max(0.0, float(elapsed))

        entered = []
        while self._elapsed_ms >= ONE_SECOND_MS:
            self._elapsed_ms -= ONE_SECOND_MS
            self.remaining_seconds -= 1
            if self.remaining_seconds <= 0:
                self._enter(next_state(self.state, config.use_uk_sequence), config,
                            keep_elapsed=True)
                entered.append(self.state)
        return entered

    # ── read-outs ────────────────────────
    @property
    def elapsed_ms(self) -> float:
        """Sub-second time carried toward the next countdown decrement."""
        return self._elapsed_ms

    @property
    def lamps(self) -> tuple:
        return lamp_states(self.state)

    def snapshot(self) -> ControllerSnapshot:
        return ControllerSnapshot(
            state=self.state,
            remaining_seconds=self.remaining_seconds,
            is_running=self.is_running,
            has_started=self.has_started,
            elapsed_ms=self._elapsed_ms,
        )

    # ── helpers ──────────────────────────
    def _enter(self, state: TrafficLightState, config: TrafficLightConfig,
               keep_elapsed: bool = False):
        self.state = state
        # non-positive durations end on the next whole second
        self.remaining_seconds = max(0, duration_for_state(state, config))
        if not keep_elapsed:
            self._elapsed_ms = 0.0
