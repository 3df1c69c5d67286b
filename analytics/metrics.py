"""
Signal-Cycle – Phase Metrics Collector
Time spent per phase, phase entries, and completed cycles.

Phase boundaries are timestamped at the end of the tick that produced
them, so figures are exact to the driver's tick resolution.
"""

import numpy as np
from simulation.traffic_light import TrafficLightState


class PhaseMetrics:
    """Collects and summarises the phase history of one controller."""

    def __init__(self):
        self.reset()

    def reset(self):
        self.clock_ms = 0.0
        self.history: list[tuple[float, TrafficLightState]] = []

    # ─── per-tick update ──────────────────
    def start_phase(self, state: TrafficLightState):
        """Mark ``state`` as entered at the current simulated time."""
        self.history.append((self.clock_ms, state))

    def tick(self, elapsed_ms: float, entered=()):
        """Advance simulated time, then record any phases entered."""
        self.clock_ms += max(0.0, float(elapsed_ms))
        for state in entered:
            self.start_phase(state)

    # ─── computed stats ───────────────────
    def _closed_visits(self, state: TrafficLightState) -> np.ndarray:
        """Lengths (ms) of finished visits to ``state``."""
        if len(self.history) < 2:
            return np.array([])
        starts = np.array([t for t, _ in self.history])
        lengths = np.diff(starts)
        mask = np.array([s == state for _, s in self.history[:-1]])
        return lengths[mask]

    def entries(self, state: TrafficLightState) -> int:
        return sum(1 for _, s in self.history if s == state)

    def seconds_in(self, state: TrafficLightState) -> float:
        total = float(self._closed_visits(state).sum())
        if self.history and self.history[-1][1] == state:
            total += self.clock_ms - self.history[-1][0]
        return total / 1000.0

    @property
    def total_seconds(self) -> float:
        if not self.history:
            return 0.0
        return (self.clock_ms - self.history[0][0]) / 1000.0

    @property
    def completed_cycles(self) -> int:
        """Returns to RED after the first recorded phase."""
        return sum(1 for _, s in self.history[1:] if s == TrafficLightState.RED)

    @property
    def transitions(self) -> int:
        return max(0, len(self.history) - 1)

    def duty_cycle(self, state: TrafficLightState) -> float:
        total = self.total_seconds
        return self.seconds_in(state) / total if total else 0.0

    def average_phase_length(self, state: TrafficLightState) -> float:
        visits = self._closed_visits(state)
        return float(np.mean(visits)) / 1000.0 if visits.size else 0.0

    def generate_report(self) -> str:
        lines = [
            "═" * 50,
            " Signal-Cycle — Phase Report",
            "═" * 50,
            f"  Simulated time     : {self.total_seconds:.1f} s",
            f"  Transitions        : {self.transitions}",
            f"  Completed cycles   : {self.completed_cycles}",
            "─" * 50,
        ]
        for state in TrafficLightState:
            lines.append(
                f"  {state.value:<10} entered {self.entries(state):>3}×  "
                f"{self.seconds_in(state):>7.1f} s  "
                f"({self.duty_cycle(state):>5.1%})  "
                f"avg {self.average_phase_length(state):.1f} s"
            )
        lines.append("═" * 50)
        return "\n".join(lines)
