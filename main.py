#!/usr/bin/env python3
"""
Signal-Cycle: Timed Traffic Light Simulator
═══════════════════════════════════════════
Main application — run this to open the interactive signal.

Usage:
    python main.py                          # UK sequence, 6/6/2 seconds
    python main.py --simple                 # Red → Green → Amber
    python main.py --red 10 --green 8 --amber 3
"""

import argparse
import sys
import pygame

from config.settings import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FPS,
    TICK_INTERVAL_MS, FIELD_MAX_CHARS,
    DEFAULT_RED_SECONDS, DEFAULT_GREEN_SECONDS, DEFAULT_AMBER_SECONDS,
)
from simulation.traffic_light import TrafficLightConfig
from controllers.timer_controller import TimerController
from analytics.metrics import PhaseMetrics
from visualization.renderer import Renderer, FIELD_LABELS, state_display_text, button_states

TICK_EVENT = pygame.USEREVENT + 1
FIELD_ORDER = [key for key, _ in FIELD_LABELS]

CONTROL_KEYS = {
    pygame.K_s: "start",
    pygame.K_p: "pause",
    pygame.K_c: "resume",
    pygame.K_n: "step",
    pygame.K_x: "reset",
}


def apply_control(action: str, controller, metrics, config) -> bool:
    """
    Run a control action if its button is currently enabled.

    Returns False (and changes nothing) for a greyed-out control, e.g.
    Start once the cycle is running or paused.
    """
    if not button_states(controller)[action]:
        return False

    if action == "start":
        controller.start(config)
        metrics.reset()
        metrics.start_phase(controller.state)
    elif action == "pause":
        controller.pause()
    elif action == "resume":
        controller.resume()
    elif action == "step":
        controller.step(config)
        metrics.start_phase(controller.state)
    elif action == "reset":
        controller.reset(config)
        metrics.reset()
    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Signal-Cycle Simulation")
    parser.add_argument("--red", default=str(DEFAULT_RED_SECONDS), help="Red duration (s)")
    parser.add_argument("--green", default=str(DEFAULT_GREEN_SECONDS), help="Green duration (s)")
    parser.add_argument("--amber", default=str(DEFAULT_AMBER_SECONDS), help="Amber duration (s)")
    parser.add_argument("--simple", action="store_true", help="Use Red → Green → Amber")
    return parser


def main():
    args = build_parser().parse_args()

    # ── Initialise ───────────────────────────
    renderer = Renderer(SCREEN_WIDTH, SCREEN_HEIGHT)
    controller = TimerController()
    metrics = PhaseMetrics()

    fields = {"red": args.red, "green": args.green, "amber": args.amber}
    selected = FIELD_ORDER[0]
    use_uk = not args.simple

    def current_config() -> TrafficLightConfig:
        # re-read on every use so edits apply live
        return TrafficLightConfig.from_user_input(
            fields["red"], fields["green"], fields["amber"], use_uk,
        )

    def arm_timer():
        pygame.time.set_timer(TICK_EVENT, TICK_INTERVAL_MS)
        return pygame.time.get_ticks()

    def disarm_timer():
        pygame.time.set_timer(TICK_EVENT, 0)

    controller.reset(current_config())
    last_tick = pygame.time.get_ticks()

    # ── Main loop ────────────────────────────
    clock = pygame.time.Clock()
    running = True

    print("🚦 Signal-Cycle is running!")
    print("   [S] Start  [P] Pause  [C] Resume  [N] Step  [X] Reset  [U] UK/Simple  [Tab] Field\n")

    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == TICK_EVENT:
                now = pygame.time.get_ticks()
                entered = controller.advance(now - last_tick, current_config())
                if controller.is_running:
                    metrics.tick(now - last_tick, entered)
                last_tick = now
                for state in entered:
                    print(f"→ {state_display_text(state)}")

            elif event.type == pygame.KEYDOWN:
                if event.key in CONTROL_KEYS:
                    action = CONTROL_KEYS[event.key]
                    if not apply_control(action, controller, metrics, current_config()):
                        continue
                    if action in ("start", "resume"):
                        last_tick = arm_timer()
                    elif not controller.is_running:
                        disarm_timer()
                    print(f"{action.capitalize()} → {state_display_text(controller.state)}")

                elif event.key == pygame.K_u:
                    use_uk = not use_uk
                    print(f"Sequence: {'UK' if use_uk else 'Simple'}")

                elif event.key == pygame.K_TAB:
                    selected = FIELD_ORDER[(FIELD_ORDER.index(selected) + 1) % len(FIELD_ORDER)]

                elif event.key == pygame.K_BACKSPACE:
                    fields[selected] = fields[selected][:-1]

                elif event.unicode.isdigit() and len(fields[selected]) < FIELD_MAX_CHARS:
                    fields[selected] += event.unicode

                elif event.key == pygame.K_ESCAPE:
                    running = False

        # ── Render ──
        renderer.render_frame(controller, fields, selected, use_uk, metrics.completed_cycles)
        clock.tick(FPS)

    # ── Cleanup ──
    if metrics.history:
        print(metrics.generate_report())
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
