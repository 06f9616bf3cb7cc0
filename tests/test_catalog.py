import json
import logging
import random

import pytest

from hunt_core import catalog
from hunt_core.constants import GUESS_BUDGET, STAR_COLORS
from hunt_core.data_models import BodyKind


def test_solar_system_catalog():
    bodies = catalog.solar_system()
    assert [b.name for b in bodies] == [
        "Mercury", "Venus", "Earth", "Mars", "Jupiter", "Saturn", "Uranus", "Neptune", "Sun"]
    suns = [b for b in bodies if b.is_sun]
    assert len(suns) == 1
    assert suns[0].orbit_radius == 0
    assert all(b.kind is BodyKind.ORBITING for b in bodies)


def test_star_specs():
    stars = catalog.star_specs(4, random.Random(5))
    assert [s.name for s in stars] == ["Star 1", "Star 2", "Star 3", "Star 4"]
    for s in stars:
        assert s.kind is BodyKind.STATIONARY
        assert s.color in STAR_COLORS
        assert s.radius == 4
        assert 50 <= s.position[0] <= 750 and 50 <= s.position[1] <= 750


def test_star_specs_rejects_negative_count():
    with pytest.raises(ValueError):
        catalog.star_specs(-1, random.Random(0))


def test_default_config():
    cfg = catalog.default_config()
    assert cfg.guess_budget == GUESS_BUDGET == 10
    assert cfg.star_count == 10
    assert len(cfg.catalog) == 9


def test_shipped_catalogs_are_listed():
    names = dict(catalog.list_catalogs())
    assert names["solar_system.json"] == "Solar System"
    assert names["inner_system.json"] == "Inner System"


def test_shipped_solar_system_matches_builtin():
    cfg = catalog.load_catalog("solar_system.json")
    assert list(cfg.catalog) == catalog.solar_system()
    assert cfg.guess_budget == 10


def test_inner_system_catalog():
    cfg = catalog.load_catalog("inner_system.json")
    assert cfg.guess_budget == 5
    assert cfg.star_count == 4
    polaris = cfg.catalog[-1]
    assert polaris.kind is BodyKind.STATIONARY
    assert polaris.position == (680.0, 120.0)


def test_load_catalog_skips_bad_entries(tmp_path, caplog):
    data = {
        "name": "Odd",
        "guess_budget": 3,
        "star_count": 0,
        "bodies": [
            {"name": "Good", "color": [300, -5, 10], "radius": 6, "orbit_radius": 30, "orbit_speed": 4},
            {"name": "Bad kind", "kind": "wobbling"},
            {"name": "Bad radius", "radius": "huge"},
        ],
    }
    (tmp_path / "odd.json").write_text(json.dumps(data), encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        cfg = catalog.load_catalog("odd.json", directory=str(tmp_path))
    assert cfg.name == "Odd"
    assert cfg.guess_budget == 3
    assert [b.name for b in cfg.catalog] == ["Good"]
    assert cfg.catalog[0].color == (255, 0, 10)
    assert "Skipping body #1" in caplog.text
    assert "Skipping body #2" in caplog.text


def test_unreadable_catalog_is_empty(tmp_path, caplog):
    (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        cfg = catalog.load_catalog("broken.json", directory=str(tmp_path))
    assert list(cfg.catalog) == []
    assert cfg.name == "broken"
    assert "Could not read catalog file" in caplog.text


def test_catalog_that_is_not_an_object_is_empty(tmp_path, caplog):
    (tmp_path / "array.json").write_text(json.dumps([{"name": "A"}]), encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        cfg = catalog.load_catalog("array.json", directory=str(tmp_path))
    assert list(cfg.catalog) == []
    assert cfg.name == "array"
    assert cfg.guess_budget == GUESS_BUDGET
    assert "must hold a JSON object" in caplog.text


def test_catalog_with_null_bodies_is_empty(tmp_path, caplog):
    (tmp_path / "nobodies.json").write_text(json.dumps({"name": "Nothing", "bodies": None}), encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        cfg = catalog.load_catalog("nobodies.json", directory=str(tmp_path))
    assert list(cfg.catalog) == []
    assert cfg.name == "Nothing"
    assert "'bodies' in nobodies.json must be a list" in caplog.text


def test_bad_rule_values_fall_back_to_defaults(tmp_path, caplog):
    data = {
        "name": "Typos",
        "guess_budget": "ten",
        "star_count": [3],
        "bodies": [{"name": "Earth", "radius": 10, "orbit_radius": 55, "orbit_speed": 10}],
    }
    (tmp_path / "typos.json").write_text(json.dumps(data), encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        cfg = catalog.load_catalog("typos.json", directory=str(tmp_path))
    assert cfg.guess_budget == GUESS_BUDGET
    assert cfg.star_count == 10
    assert [b.name for b in cfg.catalog] == ["Earth"]
    assert "Bad guess_budget 'ten'" in caplog.text
    assert "Bad star_count [3]" in caplog.text


def test_list_catalogs_survives_odd_files(tmp_path, monkeypatch, caplog):
    (tmp_path / "numbers.json").write_text("[1, 2]", encoding="utf-8")
    (tmp_path / "named.json").write_text(json.dumps({"name": "Named", "bodies": []}), encoding="utf-8")
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")
    monkeypatch.setattr(catalog, "CATALOGS_DIR", str(tmp_path))
    with caplog.at_level(logging.WARNING):
        items = catalog.list_catalogs()
    assert items == [("named.json", "Named"), ("numbers.json", "numbers")]
