#!/usr/bin/env python3
"""
Signal-Cycle — Headless Demo
════════════════════════════
Drives the controller from a plain loop and prints the phase timeline.

    python demo.py                        # 60 simulated seconds, instant
    python demo.py --seconds 20 --realtime
    python demo.py --simple --red 4 --green 4 --amber 1
"""

import argparse
import time

from config.settings import (
    TICK_INTERVAL_MS,
    DEFAULT_RED_SECONDS, DEFAULT_GREEN_SECONDS, DEFAULT_AMBER_SECONDS,
)
from simulation.traffic_light import TrafficLightConfig
from controllers.timer_controller import TimerController
from analytics.metrics import PhaseMetrics
from visualization.renderer import state_display_text


def run_demo(config: TrafficLightConfig, seconds: float = 60.0,
             tick_ms: float = TICK_INTERVAL_MS, realtime: bool = False,
             verbose: bool = True) -> PhaseMetrics:
    """Run ``seconds`` of signal time and return the collected metrics."""
    if tick_ms <= 0:
        raise ValueError(f"tick_ms must be positive, got {tick_ms}")

    controller = TimerController()
    metrics = PhaseMetrics()

    controller.start(config)
    metrics.start_phase(controller.state)
    if verbose:
        print(f"[{0.0:7.2f}s] {state_display_text(controller.state):<12} "
              f"({controller.remaining_seconds}s)")

    last = time.monotonic()
    while metrics.clock_ms < seconds * 1000.0:
        if realtime:
            time.sleep(tick_ms / 1000.0)
            now = time.monotonic()
            elapsed = (now - last) * 1000.0
            last = now
        else:
            elapsed = tick_ms

        entered = controller.advance(elapsed, config)
        metrics.tick(elapsed, entered)

        if verbose:
            for state in entered:
                print(f"[{metrics.clock_ms / 1000.0:7.2f}s] {state_display_text(state):<12} "
                      f"({controller.remaining_seconds}s)")

    return metrics


def main():
    parser = argparse.ArgumentParser(description="Signal-Cycle headless demo")
    parser.add_argument("--seconds", type=float, default=60.0, help="Signal time to simulate")
    parser.add_argument("--tick-ms", type=float, default=TICK_INTERVAL_MS, help="Driver cadence (ms)")
    parser.add_argument("--realtime", action="store_true", help="Sleep between ticks")
    parser.add_argument("--red", default=str(DEFAULT_RED_SECONDS))
    parser.add_argument("--green", default=str(DEFAULT_GREEN_SECONDS))
    parser.add_argument("--amber", default=str(DEFAULT_AMBER_SECONDS))
    parser.add_argument("--simple", action="store_true", help="Use Red → Green → Amber")
    args = parser.parse_args()
    if args.tick_ms <= 0:
        parser.error("--tick-ms must be positive")

    config = TrafficLightConfig.from_user_input(args.red, args.green, args.amber, not args.simple)
    print(f"🚦 Signal-Cycle demo: red={config.red_seconds}s green={config.green_seconds}s "
          f"amber={config.amber_seconds}s sequence={'UK' if config.use_uk_sequence else 'Simple'}\n")

    metrics = run_demo(config, args.seconds, args.tick_ms, args.realtime)

    print()
    print(metrics.generate_report())
    print("\n🏁 Demo complete!")


if __name__ == "__main__":
    main()
