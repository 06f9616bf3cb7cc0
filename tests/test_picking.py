from hunt_core.data_models import Body, BodyKind
from hunt_core.picking import pick_body


def body(body_id, radius):
    return Body(id=body_id, name=body_id, kind=BodyKind.ORBITING, color=(1, 2, 3), radius=radius)


def test_nearest_body_wins():
    bodies = [body("sun", 25), body("mercury", 5)]
    positions = {"sun": (400, 400), "mercury": (450, 400)}
    # inside the sun's pick radius too, but mercury is closer
    assert pick_body(bodies, positions, (448, 401)) == "mercury"
    assert pick_body(bodies, positions, (405, 400)) == "sun"


def test_miss_returns_none():
    bodies = [body("earth", 10)]
    assert pick_body(bodies, {"earth": (100, 100)}, (300, 300)) is None


def test_tiny_bodies_use_minimum_radius():
    bodies = [body("dust", 1)]
    positions = {"dust": (10, 10)}
    assert pick_body(bodies, positions, (16, 10)) == "dust"
    assert pick_body(bodies, positions, (16, 10), min_radius=2) is None


def test_bodies_without_position_are_skipped():
    bodies = [body("ghost", 10)]
    assert pick_body(bodies, {}, (0, 0)) is None
