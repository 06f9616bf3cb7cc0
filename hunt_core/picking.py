#!/usr/bin/env python3
"""
Tap hit-testing: which displayed body is under a screen point.
"""
from typing import Dict, Iterable, Optional, Tuple

from .constants import MIN_PICK_RADIUS
from .data_models import Body
from .vector_utils import vec_len, vec_sub


def pick_body(
    bodies: Iterable[Body],
    positions: Dict[str, Tuple[float, float]],
    point: Tuple[float, float],
    min_radius: float = MIN_PICK_RADIUS,
) -> Optional[str]:
    """Return the id of the nearest body whose pick radius contains point, or None."""
    best = None
    min_d = float("inf")
    for b in bodies:
        pos = positions.get(b.id)
        if pos is None:
            continue
        d = vec_len(vec_sub(pos, point))
        # Use larger of visual radius and min_radius for usability
        pr = max(b.radius * 2, min_radius)
        if d < pr and d < min_d:
            min_d = d
            best = b.id
    return best
