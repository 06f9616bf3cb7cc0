#!/usr/bin/env python3
"""
Cosmetic orbit animation.

OrbitAnimator advances an orbit angle per body on a fixed interval in its own
daemon thread. It reads the current Round through the `view` callable and keeps
its own angle table; it has no way to change game state. The renderer asks it
for screen positions each frame.
"""
import math
import threading
import time
from typing import Callable, Dict, Optional, Tuple

from .constants import ANIMATION_INTERVAL, ORBIT_CENTER, ORBIT_PIXEL_SCALE, ORBIT_RATE_SCALE
from .data_models import Body, Round
from .vector_utils import polar, vec_add, vec_scale

TWO_PI = 2 * math.pi


def angular_speed(body: Body) -> float:
    """Radians per second; slower for larger orbit_speed."""
    if not body.moves:
        return 0.0
    return ORBIT_RATE_SCALE / body.orbit_speed


def orbit_position(body: Body, angle: float, center: Tuple[float, float] = ORBIT_CENTER) -> Tuple[float, float]:
    if body.position is not None:
        return body.position
    return vec_add(center, vec_scale(polar(angle, body.orbit_radius), ORBIT_PIXEL_SCALE))


class OrbitAnimator:
    def __init__(self, view: Callable[[], Optional[Round]], interval: float = ANIMATION_INTERVAL):
        self._view = view
        self.interval = interval
        self._angles: Dict[str, float] = {}
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def tick(self, dt: float) -> None:
        """Advance every moving body by dt seconds; angles wrap back to 0 at 2π."""
        current = self._view()
        if current is None:
            return
        with self._lock:
            angles = {}
            for b in current.bodies:
                a = self._angles.get(b.id, 0.0) + angular_speed(b) * dt
                if a >= TWO_PI:
                    a = 0.0
                angles[b.id] = a
            # Bodies from a replaced round drop out here.
            self._angles = angles

    def angle_of(self, body_id: str) -> float:
        with self._lock:
            return self._angles.get(body_id, 0.0)

    def positions(self, current: Round) -> Dict[str, Tuple[float, float]]:
        with self._lock:
            angles = dict(self._angles)
        return {b.id: orbit_position(b, angles.get(b.id, 0.0)) for b in current.bodies}

    # -----------------------
    # Periodic task
    # -----------------------

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="orbit-animator", daemon=True)
        self._thread.start()

    def cancel(self, timeout: float = 1.0) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout=timeout)
            self._thread = None

    def _run(self) -> None:
        last = time.perf_counter()
        while not self._stop.wait(self.interval):
            now = time.perf_counter()
            self.tick(now - last)
            last = now
