#!/usr/bin/env python3
"""
Heart Hunt application entry point and UI/renderer coordination.

What this module does
- Opens two windows: a Pygame viewport (background thread) showing the Sun, the planets on
  their orbits and a scatter of stars, and a Dear PyGui control window (main thread).
- One body is secretly special. Clicking it in the viewport wins the round; every wrong click
  removes that body and costs a guess, and running out of guesses loses.
- The control window shows the remaining guesses, lets the player pick a catalog, guess budget
  and star count, starts new rounds, and pops up the Victory / Try Again dialog.

Threading model
- RoundController owns the Round. The viewport thread calls on_tap(); the UI thread calls
  reset(). Both are lock-protected and only swap an immutable Round, so whoever reads gets a
  whole snapshot.
- OrbitAnimator ticks orbit angles in its own thread. It can read rounds but not change them.

Running
1) Install dependencies: `pip install pygame dearpygui`
2) Run this module: `python heart_hunt.py [--budget N] [--stars N] [--catalog FILE] [--seed N]`
"""

import argparse
import logging
import math
import random
import sys
import threading
from typing import Dict, List, Tuple

# GUI and Rendering libs
import pygame
from pygame import gfxdraw
import dearpygui.dearpygui as dpg

from hunt_core.animation import OrbitAnimator
from hunt_core.catalog import default_config, list_catalogs, load_catalog
from hunt_core.constants import (
    BACKGROUND_COLOR,
    DEFAULT_STAR_COUNT,
    GUESS_BUDGET,
    HEART_COLOR,
    HUD_COLOR,
    TARGET_FPS,
    VIEW_HEIGHT,
    VIEW_WIDTH,
)
from hunt_core.data_models import BodyKind, GameConfig, Round, RoundStatus
from hunt_core.picking import pick_body
from hunt_core.round_controller import Alert, EmptyCatalogError, RoundController
from hunt_core.vector_utils import clamp

BUILTIN_CATALOG = "Solar System (built-in)"
MAX_GUESS_BUDGET = 99
MAX_STAR_COUNT = 200

# ============================================================
# Pygame Renderer Thread
# ============================================================

class PygameRenderer(threading.Thread):
    """
    Pygame loop: draws bodies and the HUD, turns left clicks into guesses.
    """
    def __init__(self, controller: RoundController, animator: OrbitAnimator):
        super().__init__(daemon=True)
        self.controller = controller
        self.animator = animator
        self.surface = None
        self.clock = None
        self.running = True

    def run(self):
        pygame.init()
        pygame.display.set_caption("Heart Hunt")
        self.surface = pygame.display.set_mode((VIEW_WIDTH, VIEW_HEIGHT))
        self.clock = pygame.time.Clock()

        while self.running:
            self.handle_events()
            self.draw()
            self.clock.tick(TARGET_FPS)

        pygame.quit()

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.handle_tap(event.pos)

    def handle_tap(self, point: Tuple[int, int]):
        current = self.controller.snapshot()
        # Taps stop counting once the round is decided
        if current is None or current.status.is_terminal:
            return
        body_id = pick_body(current.bodies, self.animator.positions(current), point)
        if body_id is not None:
            self.controller.on_tap(body_id)

    def draw(self):
        surf = self.surface
        surf.fill(BACKGROUND_COLOR)

        current = self.controller.snapshot()
        if current is None:
            pygame.display.flip()
            return
        positions = self.animator.positions(current)

        for b in current.bodies:
            pos = positions[b.id]
            if current.status is RoundStatus.WON and b.id == current.special_id:
                draw_heart(surf, pos, b.radius, HEART_COLOR)
            elif b.kind is BodyKind.STATIONARY:
                draw_star(surf, pos, b.radius, b.color)
            else:
                draw_circle(surf, pos, b.radius, b.color)

        draw_text(surf, hud_line(current), 10, 10, HUD_COLOR)
        if current.status.is_terminal:
            draw_text(surf, Alert.for_status(current.status).title, 10, 30, HEART_COLOR)

        pygame.display.flip()


def hud_line(current: Round) -> str:
    state = {
        RoundStatus.IN_PROGRESS: "Find the missing heart",
        RoundStatus.WON: "Found it!",
        RoundStatus.LOST: "Out of guesses",
    }[current.status]
    return f"Guesses left: {current.remaining_guesses}/{current.budget}  |  {state}"

_cached_font = None

def draw_text(surface, text, x, y, color):
    global _cached_font
    if not pygame.font.get_init():
        pygame.font.init()
    if _cached_font is None:
        try:
            _cached_font = pygame.font.SysFont("consolas", 16)
        except (pygame.error, OSError):
            _cached_font = pygame.font.Font(None, 16)
    img = _cached_font.render(text, True, color)
    surface.blit(img, (x, y))

def draw_circle(surface, pos, radius, color):
    x, y, r = int(pos[0]), int(pos[1]), max(2, int(radius))
    gfxdraw.filled_circle(surface, x, y, r, color)
    gfxdraw.aacircle(surface, x, y, r, color)

def star_points(pos, radius, points=5) -> List[Tuple[float, float]]:
    pts = []
    inner = radius * 0.45
    for i in range(points * 2):
        r = radius if i % 2 == 0 else inner
        ang = -math.pi / 2 + i * math.pi / points
        pts.append((pos[0] + r * math.cos(ang), pos[1] + r * math.sin(ang)))
    return pts

def draw_star(surface, pos, radius, color):
    # Stars are tiny; draw them a little larger than their radius so they read as stars
    pygame.draw.polygon(surface, color, star_points(pos, radius * 1.5))

def draw_heart(surface, pos, radius, color):
    r = max(4.0, radius)
    lobe = r * 0.55
    cx, cy = pos
    left = (int(cx - lobe), int(cy - lobe * 0.4))
    right = (int(cx + lobe), int(cy - lobe * 0.4))
    pygame.draw.circle(surface, color, left, int(lobe) + 1)
    pygame.draw.circle(surface, color, right, int(lobe) + 1)
    pygame.draw.polygon(surface, color, [
        (cx - 2 * lobe, cy - lobe * 0.2),
        (cx + 2 * lobe, cy - lobe * 0.2),
        (cx, cy + r * 1.3),
    ])

# ============================================================
# Dear PyGui UI
# ============================================================

class UI:
    """
    Dear PyGui interface: round status, new-round settings and the outcome dialog.
    """
    def __init__(self, controller: RoundController, renderer: PygameRenderer):
        self.controller = controller
        self.renderer = renderer

        self.status_msg_id = None
        self.guesses_id = None
        self.bodies_left_id = None
        self.budget_input_id = None
        self.stars_input_id = None

        self._catalog_map: Dict[str, str] = {}
        self._shown_alert = Alert.NONE

        self._build_ui()
        self._schedule_sync()

    def _schedule_sync(self):
        """Reschedule the periodic sync callback using frame callbacks (approx ~10Hz)."""
        current = dpg.get_frame_count()
        dpg.set_frame_callback(current + 6, self._sync_ui_with_round)

    # -----------------------
    # UI Construction
    # -----------------------

    def _build_ui(self):
        dpg.create_context()
        dpg.create_viewport(title='Heart Hunt - Controls', width=420, height=340)

        cfg = self.controller.config
        with dpg.window(label="Controls", width=400, height=320, pos=(10, 10), tag="main_window"):
            dpg.add_text("Round")
            self.guesses_id = dpg.add_text("")
            self.bodies_left_id = dpg.add_text("")

            dpg.add_separator()

            dpg.add_text("Next Round Settings")
            with dpg.group(horizontal=True):
                dpg.add_text("Catalog:")
                self._catalog_map = {BUILTIN_CATALOG: ""}
                for fn, display in list_catalogs():
                    self._catalog_map[display] = fn
                dpg.add_combo(list(self._catalog_map.keys()),
                              default_value=BUILTIN_CATALOG,
                              width=220,
                              callback=lambda s, a, u: self._on_catalog_selected(a),
                              tag="catalog_combo")
            self.budget_input_id = dpg.add_input_int(label="Guess budget", default_value=cfg.guess_budget,
                                                     min_value=1, max_value=MAX_GUESS_BUDGET,
                                                     min_clamped=True, max_clamped=True, width=120)
            self.stars_input_id = dpg.add_input_int(label="Stars", default_value=cfg.star_count,
                                                    min_value=0, max_value=MAX_STAR_COUNT,
                                                    min_clamped=True, max_clamped=True, width=120)
            dpg.add_button(label="New Round", callback=self._on_new_round)
            self.status_msg_id = dpg.add_text("")

        with dpg.window(label="", modal=True, show=False, tag="outcome_modal",
                        width=300, height=120, pos=(50, 100), no_close=True):
            dpg.add_text("", tag="outcome_message")
            dpg.add_button(label="", tag="outcome_button", width=-1, callback=self._on_outcome_button)

        dpg.setup_dearpygui()
        dpg.show_viewport()
        dpg.set_primary_window("main_window", True)

    # -----------------------
    # UI Callbacks
    # -----------------------

    def _set_status(self, msg: str, color=(180, 220, 180)):
        dpg.set_value(self.status_msg_id, msg)
        dpg.configure_item(self.status_msg_id, color=color)

    def _set_error(self, msg: str):
        dpg.set_value(self.status_msg_id, msg)
        dpg.configure_item(self.status_msg_id, color=(255, 120, 120))

    def _on_catalog_selected(self, display: str):
        fn = self._catalog_map.get(display)
        cfg = load_catalog(fn) if fn else default_config()
        dpg.set_value(self.budget_input_id, cfg.guess_budget)
        dpg.set_value(self.stars_input_id, cfg.star_count)

    def _config_from_inputs(self) -> GameConfig:
        display = dpg.get_value("catalog_combo")
        fn = self._catalog_map.get(display)
        cfg = load_catalog(fn) if fn else default_config()
        cfg.guess_budget = int(clamp(dpg.get_value(self.budget_input_id), 1, MAX_GUESS_BUDGET))
        cfg.star_count = int(clamp(dpg.get_value(self.stars_input_id), 0, MAX_STAR_COUNT))
        return cfg

    def _on_new_round(self):
        cfg = self._config_from_inputs()
        try:
            self.controller.reset(cfg)
        except EmptyCatalogError:
            logging.error(f"Catalog '{cfg.name}' has no bodies; keeping the current round.")
            self._set_error(f"Catalog '{cfg.name}' has no bodies.")
            return
        except ValueError as e:
            logging.error(f"Could not start a round: {e}")
            self._set_error(str(e))
            return
        self._hide_outcome()
        self._set_status(f"New round: {cfg.name}.")

    def _on_outcome_button(self):
        # Both dialog buttons start over with the same settings
        self.controller.reset()
        self._hide_outcome()
        self._set_status("New round started.")

    def _show_outcome(self, alert: Alert):
        dpg.configure_item("outcome_modal", label=alert.title, show=True)
        dpg.set_value("outcome_message", alert.message)
        dpg.configure_item("outcome_button", label=alert.button)
        self._shown_alert = alert

    def _hide_outcome(self):
        dpg.configure_item("outcome_modal", show=False)
        self._shown_alert = Alert.NONE

    def _sync_ui_with_round(self):
        """
        Periodic UI update: guess counter, bodies left, and the outcome dialog once a round ends.
        """
        current = self.controller.snapshot()
        if current is not None:
            dpg.set_value(self.guesses_id, f"Guesses left: {current.remaining_guesses} of {current.budget}")
            dpg.set_value(self.bodies_left_id, f"Bodies in play: {len(current.bodies)} of {current.catalog_size}")
            alert = Alert.for_status(current.status)
            if alert is not Alert.NONE and self._shown_alert is Alert.NONE:
                self._show_outcome(alert)
        if not self.renderer.running:
            dpg.stop_dearpygui()
            return
        # Reschedule next sync
        self._schedule_sync()

# ============================================================
# Configuration and Application Entry
# ============================================================

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Find the missing heart hidden among the planets and stars.")
    parser.add_argument("--budget", type=int, default=None, help=f"Wrong guesses allowed per round (default {GUESS_BUDGET}).")
    parser.add_argument("--stars", type=int, default=None, help=f"Decorative stars to scatter (default {DEFAULT_STAR_COUNT}).")
    parser.add_argument("--catalog", type=str, default=None, help="Catalog JSON file name under catalogs/.")
    parser.add_argument("--seed", type=int, default=None, help="Seed the random source for a repeatable round.")
    parser.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)

def build_config(args) -> GameConfig:
    cfg = load_catalog(args.catalog) if args.catalog else default_config()
    if args.budget is not None:
        cfg.guess_budget = args.budget
    if args.stars is not None:
        cfg.star_count = args.stars
    return cfg

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format='%(asctime)s - %(levelname)s - %(message)s')

    controller = RoundController(build_config(args), random.Random(args.seed))
    try:
        controller.start()
    except ValueError as e:
        logging.critical(f"Could not start the first round: {e}. Exiting.")
        sys.exit(1)

    animator = OrbitAnimator(controller.snapshot)
    animator.start()

    renderer = PygameRenderer(controller, animator)
    renderer.start()

    UI(controller, renderer)

    # Run Dear PyGui event loop
    try:
        dpg.start_dearpygui()
    finally:
        renderer.running = False
        renderer.join(timeout=2.0)
        animator.cancel()
        dpg.destroy_context()

if __name__ == "__main__":
    main()
