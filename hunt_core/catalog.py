#!/usr/bin/env python3
"""
Body catalogs: the built-in solar system, decorative stars and JSON catalog files.

Schemas
=======
Catalog JSON (catalogs/*.json):
{
  "name": "Human-friendly catalog name",
  "description": "Optional description",
  "guess_budget": 10,                 # optional, default GUESS_BUDGET
  "star_count": 10,                   # optional, default DEFAULT_STAR_COUNT
  "bodies": [
    {
      "name": "Earth",
      "kind": "orbiting",             # orbiting | stationary, default orbiting
      "color": [0, 122, 255],
      "radius": 10,
      "orbit_radius": 55,
      "orbit_speed": 10,
      "is_sun": false,                # optional
      "position": [120, 300]          # optional, stationary bodies only
    }
  ]
}

Users can add their own JSON files into catalogs/ and they'll be picked up by the loader.
"""
import json
import logging
import os
import random
from typing import List, Optional, Tuple

from .constants import (
    DEFAULT_STAR_COUNT,
    EARTH_BLUE,
    GOLD,
    GUESS_BUDGET,
    JUPITER_ORANGE,
    LIGHT_BLUE_GREEN,
    MARS_RED,
    MERCURY_GRAY,
    NEPTUNE_BLUE,
    STAR_COLORS,
    STAR_POSITION_RANGE,
    STAR_RADIUS,
    SUN_YELLOW,
    VENUS_YELLOW,
)
from .data_models import BodyKind, BodySpec, GameConfig

CATALOGS_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "catalogs")


def solar_system() -> List[BodySpec]:
    """The eight planets on their orbits plus the Sun at the centre."""
    return [
        BodySpec("Mercury", color=MERCURY_GRAY, radius=5, orbit_radius=25, orbit_speed=3),
        BodySpec("Venus", color=VENUS_YELLOW, radius=8, orbit_radius=40, orbit_speed=7),
        BodySpec("Earth", color=EARTH_BLUE, radius=10, orbit_radius=55, orbit_speed=10),
        BodySpec("Mars", color=MARS_RED, radius=7, orbit_radius=70, orbit_speed=15),
        BodySpec("Jupiter", color=JUPITER_ORANGE, radius=15, orbit_radius=100, orbit_speed=20),
        BodySpec("Saturn", color=GOLD, radius=12, orbit_radius=125, orbit_speed=25),
        BodySpec("Uranus", color=LIGHT_BLUE_GREEN, radius=10, orbit_radius=150, orbit_speed=30),
        BodySpec("Neptune", color=NEPTUNE_BLUE, radius=10, orbit_radius=175, orbit_speed=35),
        BodySpec("Sun", color=SUN_YELLOW, radius=25, is_sun=True),
    ]


def random_star_position(rng: random.Random) -> Tuple[float, float]:
    lo, hi = STAR_POSITION_RANGE
    return (rng.uniform(lo, hi), rng.uniform(lo, hi))


def star_specs(count: int, rng: random.Random) -> List[BodySpec]:
    """Decorative stationary stars with a random colour and position each round."""
    if count < 0:
        raise ValueError(f"star count must not be negative, got {count}")
    return [
        BodySpec(
            name=f"Star {i + 1}",
            kind=BodyKind.STATIONARY,
            color=rng.choice(STAR_COLORS),
            radius=STAR_RADIUS,
            position=random_star_position(rng),
        )
        for i in range(count)
    ]


def default_config(guess_budget: int = GUESS_BUDGET, star_count: int = DEFAULT_STAR_COUNT) -> GameConfig:
    return GameConfig(catalog=solar_system(), guess_budget=guess_budget, star_count=star_count)


def _read_json(path: str) -> Optional[dict]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logging.warning(f"Could not read catalog file {path}: {e}")
        return None
    if not isinstance(data, dict):
        logging.warning(f"Catalog file {path} must hold a JSON object, got {type(data).__name__}")
        return None
    return data


def _read_int(data: dict, key: str, default: int, file_name: str) -> int:
    try:
        return int(data.get(key, default))
    except (TypeError, ValueError):
        logging.warning(f"Bad {key} {data.get(key)!r} in {file_name}; using {default}")
        return default


def _display_name(data: dict, file_name: str) -> str:
    return str(data.get("name") or os.path.splitext(file_name)[0])


def _coerce_color(c: List[int]) -> Tuple[int, int, int]:
    try:
        r, g, b = int(c[0]), int(c[1]), int(c[2])
        r = max(0, min(255, r)); g = max(0, min(255, g)); b = max(0, min(255, b))
        return (r, g, b)
    except (TypeError, ValueError, IndexError):
        return (200, 200, 255)


def _parse_body(b: dict) -> BodySpec:
    kind = BodyKind(b.get("kind", BodyKind.ORBITING.value))
    position = None
    if b.get("position") is not None:
        position = (float(b["position"][0]), float(b["position"][1]))
    return BodySpec(
        name=str(b.get("name", "Body")),
        kind=kind,
        color=_coerce_color(b.get("color", [200, 200, 255])),
        radius=float(b.get("radius", STAR_RADIUS if kind is BodyKind.STATIONARY else 5.0)),
        orbit_radius=float(b.get("orbit_radius", 0.0)),
        orbit_speed=float(b.get("orbit_speed", 0.0)),
        is_sun=bool(b.get("is_sun", False)),
        position=position,
    )


def list_catalogs() -> List[Tuple[str, str]]:
    """Return list of (file_name, display_name) for available catalogs."""
    items: List[Tuple[str, str]] = []
    if not os.path.isdir(CATALOGS_DIR):
        return items
    for fn in sorted(os.listdir(CATALOGS_DIR)):
        if not fn.lower().endswith(".json"):
            continue
        data = _read_json(os.path.join(CATALOGS_DIR, fn)) or {}
        items.append((fn, _display_name(data, fn)))
    return items


def load_catalog(file_name: str, directory: Optional[str] = None) -> GameConfig:
    """
    Load a catalog JSON by file name.
    Malformed body entries and rule values are skipped with a warning; an unreadable
    file gives an empty catalog.
    """
    path = os.path.join(directory or CATALOGS_DIR, file_name)
    data = _read_json(path) or {}
    entries = data.get("bodies", [])
    if not isinstance(entries, list):
        logging.warning(f"'bodies' in {file_name} must be a list, got {type(entries).__name__}")
        entries = []
    bodies: List[BodySpec] = []
    for i, b in enumerate(entries):
        try:
            bodies.append(_parse_body(b))
        except (KeyError, TypeError, ValueError, IndexError, AttributeError) as e:
            logging.warning(f"Skipping body #{i} in {file_name}: {e}")
    return GameConfig(
        catalog=bodies,
        guess_budget=_read_int(data, "guess_budget", GUESS_BUDGET, file_name),
        star_count=_read_int(data, "star_count", DEFAULT_STAR_COUNT, file_name),
        name=_display_name(data, file_name),
    )
