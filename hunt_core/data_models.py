#!/usr/bin/env python3
"""
Data models for Heart Hunt.

This module defines the Body and Round dataclasses shared between the round
controller, the animator and the renderer.

Units and usage
- radius, orbit_radius and position are in screen pixels; colors are RGB tuples in 0..255.
- Body and Round are frozen: a guess produces a new Round rather than editing the old one,
  so the renderer thread can hold a snapshot while the controller moves on.
"""
import enum
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from .constants import DEFAULT_STAR_COUNT, GUESS_BUDGET


class BodyKind(enum.Enum):
    ORBITING = "orbiting"
    STATIONARY = "stationary"


class RoundStatus(enum.Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self is not RoundStatus.IN_PROGRESS


@dataclass(frozen=True)
class BodySpec:
    """
    Catalog entry from which a Body is built at the start of every round.

    Fields:
    - name: Display label
    - kind: ORBITING (circles the centre) or STATIONARY (fixed position)
    - color: RGB tuple used for rendering
    - radius: Visual radius in pixels
    - orbit_radius: Distance from the centre for orbiting bodies
    - orbit_speed: Larger is slower; 0 keeps the body still
    - is_sun: Drawn at the centre, never moves
    - position: Fixed position for stationary bodies; None means "place randomly"
    """
    name: str
    kind: BodyKind = BodyKind.ORBITING
    color: Tuple[int, int, int] = (200, 200, 255)
    radius: float = 5.0
    orbit_radius: float = 0.0
    orbit_speed: float = 0.0
    is_sun: bool = False
    position: Optional[Tuple[float, float]] = None


@dataclass(frozen=True)
class Body:
    """One celestial object in play. `id` is unique within its round."""
    id: str
    name: str
    kind: BodyKind
    color: Tuple[int, int, int]
    radius: float
    orbit_radius: float = 0.0
    orbit_speed: float = 0.0
    is_sun: bool = False
    position: Optional[Tuple[float, float]] = None

    @property
    def moves(self) -> bool:
        return self.kind is BodyKind.ORBITING and not self.is_sun and self.orbit_speed > 0


@dataclass(frozen=True)
class Round:
    """
    Game state for one round.

    - bodies: bodies still guessable, in display order
    - special_id: id of the winning body
    - remaining_guesses: wrong guesses left
    - status: IN_PROGRESS until the special body is found or guesses run out
    - catalog_size / budget: what the round started with, for display
    """
    bodies: Tuple[Body, ...]
    special_id: str
    remaining_guesses: int
    status: RoundStatus = RoundStatus.IN_PROGRESS
    catalog_size: int = 0
    budget: int = 0

    def find(self, body_id: str) -> Optional[Body]:
        for b in self.bodies:
            if b.id == body_id:
                return b
        return None

    def __contains__(self, body_id: str) -> bool:
        return self.find(body_id) is not None


@dataclass
class GameConfig:
    """Catalog and rules a round is started from."""
    catalog: Sequence[BodySpec] = field(default_factory=list)
    guess_budget: int = GUESS_BUDGET
    star_count: int = DEFAULT_STAR_COUNT
    name: str = "Solar System"
