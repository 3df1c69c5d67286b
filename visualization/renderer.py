"""
Signal-Cycle – PyGame Renderer (dark-theme signal head + control panel)
"""

import pygame
from config.settings import (
    SCREEN_WIDTH, SCREEN_HEIGHT,
    BACKGROUND_COLOR,
    HEAD_CENTER_X, HEAD_CENTER_Y, HEAD_WIDTH, HEAD_HEIGHT,
    LAMP_RADIUS, LAMP_SPACING,
    LAMP_RED, LAMP_AMBER, LAMP_GREEN,
    LAMP_RED_DIM, LAMP_AMBER_DIM, LAMP_GREEN_DIM,
    HOUSING_COLOR, HOUSING_BORDER,
    UI_PANEL_BG, UI_PANEL_BORDER,
    UI_TEXT_PRIMARY, UI_TEXT_SECONDARY, UI_TEXT_DISABLED,
    UI_ACCENT_BLUE, UI_ACCENT_GREEN, UI_ACCENT_RED, UI_ACCENT_YELLOW,
)
from simulation.traffic_light import TrafficLightState, lamp_states


STATE_TEXT = {
    TrafficLightState.RED: "RED",
    TrafficLightState.RED_AMBER: "RED + AMBER",
    TrafficLightState.GREEN: "GREEN",
    TrafficLightState.AMBER: "AMBER",
}

STATE_ACCENT = {
    TrafficLightState.RED: UI_ACCENT_RED,
    TrafficLightState.RED_AMBER: UI_ACCENT_YELLOW,
    TrafficLightState.GREEN: UI_ACCENT_GREEN,
    TrafficLightState.AMBER: UI_ACCENT_YELLOW,
}

FIELD_LABELS = [("red", "Red"), ("green", "Green"), ("amber", "Amber")]


# ─── display mapping (pure) ───────────────
def state_display_text(state: TrafficLightState) -> str:
    return STATE_TEXT[state]


def countdown_text(remaining_seconds: int) -> str:
    return f"{remaining_seconds}s remaining"


def status_text(controller) -> str:
    if not controller.has_started:
        return "Stopped"
    return "Running" if controller.is_running else "Paused"


def lamp_colors(state: TrafficLightState) -> tuple:
    """(red, amber, green) fill colours – bright when lit, dim when off."""
    red, amber, green = lamp_states(state)
    return (
        LAMP_RED if red else LAMP_RED_DIM,
        LAMP_AMBER if amber else LAMP_AMBER_DIM,
        LAMP_GREEN if green else LAMP_GREEN_DIM,
    )


def button_states(controller) -> dict:
    """Which controls are currently available."""
    return {
        "start": not controller.has_started,
        "pause": controller.is_running,
        "resume": controller.has_started and not controller.is_running,
        "step": True,
        "reset": True,
    }


class Renderer:
    """PyGame window for a single signal head."""

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT):
        pygame.init()
        self.width = width
        self.height = height
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("🚦 Signal-Cycle — Traffic Light Simulator")

        self.font_large = pygame.font.SysFont("Arial", 32, bold=True)
        self.font_med = pygame.font.SysFont("Arial", 20)
        self.font_small = pygame.font.SysFont("Arial", 15)

    # ─── signal head ──────────────────────
    def draw_signal_head(self, state: TrafficLightState):
        housing = pygame.Rect(0, 0, HEAD_WIDTH, HEAD_HEIGHT)
        housing.center = (HEAD_CENTER_X, HEAD_CENTER_Y)
        pygame.draw.rect(self.screen, HOUSING_COLOR, housing, border_radius=16)
        pygame.draw.rect(self.screen, HOUSING_BORDER, housing, width=2, border_radius=16)

        lit = lamp_states(state)
        for i, color in enumerate(lamp_colors(state)):
            cy = HEAD_CENTER_Y - LAMP_SPACING + i * LAMP_SPACING

            # Glow effect
            if lit[i]:
                glow_surf = pygame.Surface((LAMP_RADIUS * 4, LAMP_RADIUS * 4), pygame.SRCALPHA)
                pygame.draw.circle(glow_surf, (*color, 50),
                                   (LAMP_RADIUS * 2, LAMP_RADIUS * 2), LAMP_RADIUS * 2)
                self.screen.blit(glow_surf, (HEAD_CENTER_X - LAMP_RADIUS * 2, cy - LAMP_RADIUS * 2))

            pygame.draw.circle(self.screen, color, (HEAD_CENTER_X, cy), LAMP_RADIUS)

    # ─── status panel ─────────────────────
    def draw_status_panel(self, controller, use_uk_sequence: bool, cycles: int):
        px, py = 300, 30
        panel_w, panel_h = self.width - px - 20, 180
        pygame.draw.rect(self.screen, UI_PANEL_BG, (px, py, panel_w, panel_h), border_radius=4)
        pygame.draw.rect(self.screen, UI_PANEL_BORDER, (px, py, panel_w, panel_h), 1, border_radius=4)

        y = py + 12
        state_surf = self.font_large.render(
            state_display_text(controller.state), True, STATE_ACCENT[controller.state])
        self.screen.blit(state_surf, (px + 15, y)); y += 45

        countdown = self.font_med.render(
            countdown_text(controller.remaining_seconds), True, UI_TEXT_PRIMARY)
        self.screen.blit(countdown, (px + 15, y)); y += 30

        status = self.font_med.render(f"Status: {status_text(controller)}", True, UI_ACCENT_BLUE)
        self.screen.blit(status, (px + 15, y)); y += 28

        sequence = "UK (Red → Red+Amber → Green → Amber)" if use_uk_sequence \
            else "Simple (Red → Green → Amber)"
        seq_surf = self.font_small.render(f"Sequence: {sequence}", True, UI_TEXT_SECONDARY)
        self.screen.blit(seq_surf, (px + 15, y)); y += 22

        cyc_surf = self.font_small.render(f"Cycles completed: {cycles}", True, UI_TEXT_SECONDARY)
        self.screen.blit(cyc_surf, (px + 15, y))

    # ─── duration fields ──────────────────
    def draw_duration_fields(self, fields: dict, selected: str):
        px, y = 300, 230
        header = self.font_med.render("Durations (s, 1–60)", True, UI_ACCENT_BLUE)
        self.screen.blit(header, (px, y)); y += 32

        for key, label in FIELD_LABELS:
            active = key == selected
            lbl = self.font_small.render(f"{label}:", True, UI_TEXT_SECONDARY)
            self.screen.blit(lbl, (px, y + 4))

            box = pygame.Rect(px + 70, y, 70, 26)
            pygame.draw.rect(self.screen, UI_PANEL_BG, box, border_radius=3)
            pygame.draw.rect(self.screen, UI_ACCENT_GREEN if active else UI_PANEL_BORDER,
                             box, 2 if active else 1, border_radius=3)
            text = self.font_small.render(fields.get(key, ""), True, UI_TEXT_PRIMARY)
            self.screen.blit(text, (box.x + 8, box.y + 4))
            y += 34

    # ─── controls bar ─────────────────────
    def draw_controls(self, controller):
        bot_h = 40
        by = self.height - bot_h
        pygame.draw.rect(self.screen, UI_PANEL_BG, (0, by, self.width, bot_h))

        enabled = button_states(controller)
        controls = [
            ("[S] Start", enabled["start"]),
            ("[P] Pause", enabled["pause"]),
            ("[C] Resume", enabled["resume"]),
            ("[N] Step", enabled["step"]),
            ("[X] Reset", enabled["reset"]),
            ("[U] UK/Simple", True),
            ("[Tab] Field", True),
        ]
        cx = 15
        for text, active in controls:
            s = self.font_small.render(text, True, UI_TEXT_PRIMARY if active else UI_TEXT_DISABLED)
            self.screen.blit(s, (cx, by + 12))
            cx += s.get_width() + 18

    # ─── full frame ───────────────────────
    def render_frame(self, controller, fields, selected, use_uk_sequence, cycles=0):
        self.screen.fill(BACKGROUND_COLOR)
        self.draw_signal_head(controller.state)
        self.draw_status_panel(controller, use_uk_sequence, cycles)
        self.draw_duration_fields(fields, selected)
        self.draw_controls(controller)
        pygame.display.flip()
