"""
Signal-Cycle – Control Key Tests
═════════════════════════════════
Key actions only run when their control is enabled, matching what the
control bar shows.

Run: python -m pytest tests/test_controls.py -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pygame

from simulation.traffic_light import TrafficLightState, TrafficLightConfig
from controllers.timer_controller import TimerController
from analytics.metrics import PhaseMetrics
from main import apply_control, CONTROL_KEYS

CFG = TrafficLightConfig()


# ─── helpers ────────────────────────────
def _running():
    ctrl, metrics = TimerController(), PhaseMetrics()
    assert apply_control("start", ctrl, metrics, CFG)
    return ctrl, metrics


def test_key_map():
    assert CONTROL_KEYS[pygame.K_s] == "start"
    assert set(CONTROL_KEYS.values()) == {"start", "pause", "resume", "step", "reset"}


def test_start_from_stopped():
    ctrl, metrics = _running()
    assert ctrl.is_running
    assert metrics.history == [(0.0, TrafficLightState.RED)]


def test_start_ignored_while_running():
    ctrl, metrics = _running()
    ctrl.advance(7500, CFG)
    metrics.tick(7500, [TrafficLightState.RED_AMBER])
    before = ctrl.snapshot()

    assert not apply_control("start", ctrl, metrics, CFG)
    assert ctrl.snapshot() == before
    assert len(metrics.history) == 2


def test_start_ignored_while_paused():
    ctrl, metrics = _running()
    ctrl.advance(2500, CFG)
    assert apply_control("pause", ctrl, metrics, CFG)
    before = ctrl.snapshot()

    assert not apply_control("start", ctrl, metrics, CFG)
    assert ctrl.snapshot() == before
    assert not ctrl.is_running


def test_start_available_again_after_reset():
    ctrl, metrics = _running()
    assert apply_control("reset", ctrl, metrics, CFG)
    assert metrics.history == []
    assert apply_control("start", ctrl, metrics, CFG)
    assert ctrl.is_running


def test_pause_and_resume_follow_enablement():
    ctrl, metrics = TimerController(), PhaseMetrics()
    assert not apply_control("pause", ctrl, metrics, CFG)
    assert not apply_control("resume", ctrl, metrics, CFG)

    apply_control("start", ctrl, metrics, CFG)
    assert not apply_control("resume", ctrl, metrics, CFG)
    assert apply_control("pause", ctrl, metrics, CFG)
    assert not apply_control("pause", ctrl, metrics, CFG)
    assert apply_control("resume", ctrl, metrics, CFG)
    assert ctrl.is_running


def test_step_always_available():
    ctrl, metrics = TimerController(), PhaseMetrics()
    assert apply_control("step", ctrl, metrics, CFG)
    assert ctrl.state == TrafficLightState.RED_AMBER
    assert metrics.history == [(0.0, TrafficLightState.RED_AMBER)]
    assert not ctrl.is_running
