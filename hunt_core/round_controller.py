#!/usr/bin/env python3
"""
Round lifecycle for Heart Hunt: picking the special body, counting guesses,
deciding win or loss, and starting over.

The transitions are plain functions over the immutable Round:
- start_round(config, rng) builds a fresh Round from a GameConfig.
- guess(round, body_id) returns the Round after a tap.
- reset(config, rng) is start_round again; nothing carries over.

RoundController wraps them for the UI. The viewport thread calls on_tap() and
the control window calls reset(); both go through a lock and only ever swap the
Round reference, so readers always see a complete snapshot.
"""
import enum
import logging
import random
import threading
import uuid
from dataclasses import replace
from typing import List, Optional

from .catalog import default_config, random_star_position, star_specs
from .data_models import Body, BodyKind, BodySpec, GameConfig, Round, RoundStatus


class EmptyCatalogError(ValueError):
    """Raised when a round is started with no bodies to choose the special one from."""


class Alert(enum.Enum):
    NONE = "none"
    VICTORY = "victory"
    TRY_AGAIN = "try_again"

    @property
    def title(self) -> str:
        return {Alert.VICTORY: "Victory!", Alert.TRY_AGAIN: "Try Again"}.get(self, "")

    @property
    def message(self) -> str:
        return {
            Alert.VICTORY: "You found the missing heart!",
            Alert.TRY_AGAIN: "You'll do better next time.",
        }.get(self, "")

    @property
    def button(self) -> str:
        return {Alert.VICTORY: "Play Again", Alert.TRY_AGAIN: "Try Again"}.get(self, "")

    @classmethod
    def for_status(cls, status: RoundStatus) -> "Alert":
        if status is RoundStatus.WON:
            return cls.VICTORY
        if status is RoundStatus.LOST:
            return cls.TRY_AGAIN
        return cls.NONE


def _new_id(rng: random.Random) -> str:
    return str(uuid.UUID(int=rng.getrandbits(128), version=4))


def _build_body(spec: BodySpec, rng: random.Random, taken: set) -> Body:
    body_id = _new_id(rng)
    while body_id in taken:
        body_id = _new_id(rng)
    taken.add(body_id)
    position = spec.position
    if spec.kind is BodyKind.STATIONARY and position is None:
        position = random_star_position(rng)
    return Body(
        id=body_id,
        name=spec.name,
        kind=spec.kind,
        color=spec.color,
        radius=spec.radius,
        orbit_radius=spec.orbit_radius,
        orbit_speed=spec.orbit_speed,
        is_sun=spec.is_sun,
        position=position,
    )


def start_round(config: GameConfig, rng: Optional[random.Random] = None) -> Round:
    """
    Build a fresh Round from config.

    The special body is drawn uniformly from every body in play, stars included.
    Raises EmptyCatalogError if there is nothing to draw from and ValueError for a
    guess budget below 1.
    """
    rng = rng or random.Random()
    if config.guess_budget < 1:
        raise ValueError(f"guess budget must be at least 1, got {config.guess_budget}")
    specs: List[BodySpec] = list(config.catalog) + star_specs(config.star_count, rng)
    if not specs:
        raise EmptyCatalogError("cannot start a round with an empty catalog")

    taken: set = set()
    bodies = tuple(_build_body(s, rng, taken) for s in specs)
    special = rng.choice(bodies)
    logging.info(f"Round started: {len(bodies)} bodies, {config.guess_budget} guesses")
    logging.debug(f"Special body is {special.name} ({special.id})")
    return Round(
        bodies=bodies,
        special_id=special.id,
        remaining_guesses=config.guess_budget,
        status=RoundStatus.IN_PROGRESS,
        catalog_size=len(bodies),
        budget=config.guess_budget,
    )


def guess(current: Round, body_id: str) -> Round:
    """
    Apply a tap on body_id and return the resulting Round.

    Taps on a finished round, or on a body that is not in play, change nothing.
    """
    if current.status.is_terminal:
        logging.debug(f"Ignoring guess {body_id}: round already {current.status.value}")
        return current
    body = current.find(body_id)
    if body is None:
        logging.warning(f"Ignoring guess for unknown body id {body_id!r}")
        return current

    if body.id == current.special_id:
        logging.info(f"{body.name} was the special body: round won")
        return replace(current, status=RoundStatus.WON)

    remaining = current.remaining_guesses - 1
    status = RoundStatus.LOST if remaining <= 0 else RoundStatus.IN_PROGRESS
    logging.info(f"{body.name} was not it: {remaining} guesses left")
    if status is RoundStatus.LOST:
        logging.info("Out of guesses: round lost")
    return replace(
        current,
        bodies=tuple(b for b in current.bodies if b.id != body.id),
        remaining_guesses=remaining,
        status=status,
    )


def reset(config: GameConfig, rng: Optional[random.Random] = None) -> Round:
    return start_round(config, rng)


class RoundController:
    """
    Owns the current Round for the running game.
    Safe to call from both the viewport thread and the control window.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        self.lock = threading.RLock()
        self.config = config or default_config()
        self.rng = rng or random.Random()
        self._round: Optional[Round] = None

    @property
    def round(self) -> Round:
        with self.lock:
            if self._round is None:
                raise RuntimeError("no round has been started")
            return self._round

    @property
    def started(self) -> bool:
        with self.lock:
            return self._round is not None

    @property
    def status(self) -> RoundStatus:
        return self.round.status

    def snapshot(self) -> Optional[Round]:
        """Current Round, or None before the first start(). Never blocks on a missing round."""
        with self.lock:
            return self._round

    def start(self, config: Optional[GameConfig] = None) -> Round:
        with self.lock:
            cfg = config or self.config
            new_round = start_round(cfg, self.rng)
            # Only adopt the config once it has produced a valid round.
            self.config = cfg
            self._round = new_round
            return new_round

    def reset(self, config: Optional[GameConfig] = None) -> Round:
        return self.start(config)

    def on_tap(self, body_id: str) -> Round:
        with self.lock:
            self._round = guess(self.round, body_id)
            return self._round

    def is_special(self, body_id: str) -> bool:
        return self.round.special_id == body_id

    def outcome(self) -> Alert:
        return Alert.for_status(self.status)
