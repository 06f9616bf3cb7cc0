import random

import pytest

from hunt_core.data_models import BodySpec, GameConfig


class ForcedChoice(random.Random):
    """Random source whose choice() picks the body named `target` when it is offered one."""
    target = None

    def choice(self, seq):
        for item in seq:
            if getattr(item, "name", None) == self.target:
                return item
        return super().choice(seq)


def spec(name, **kw):
    return BodySpec(name=name, orbit_radius=kw.pop("orbit_radius", 50), orbit_speed=kw.pop("orbit_speed", 10), **kw)


@pytest.fixture()
def forced_rng():
    def make(target, seed=0):
        rng = ForcedChoice(seed)
        rng.target = target
        return rng
    return make


@pytest.fixture()
def abc_config():
    return GameConfig(catalog=[spec("A"), spec("B"), spec("C")], guess_budget=2, star_count=0, name="ABC")


@pytest.fixture()
def ab_config():
    return GameConfig(catalog=[spec("A"), spec("B")], guess_budget=5, star_count=0, name="AB")

