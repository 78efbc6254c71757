import pytest

from liftlog.cache import DASHBOARD_PATH, ViewCache, workout_path

def test_get_set_roundtrip():
    c = ViewCache()
    assert c.get(DASHBOARD_PATH, ("u1", "2025-06-01")) is None
    c.set(DASHBOARD_PATH, ("u1", "2025-06-01"), "view")
    assert c.get(DASHBOARD_PATH, ("u1", "2025-06-01")) == "view"
    assert c.get(DASHBOARD_PATH, ("u2", "2025-06-01")) is None

def test_invalidate_drops_every_key_under_path():
    c = ViewCache()
    c.set(DASHBOARD_PATH, ("u1", "2025-06-01"), 1)
    c.set(DASHBOARD_PATH, ("u2", "2025-06-02"), 2)
    c.set(workout_path(7), "u1", 3)
    c.invalidate(DASHBOARD_PATH)
    assert DASHBOARD_PATH not in c
    assert c.get(DASHBOARD_PATH, ("u2", "2025-06-02")) is None
    assert c.get(workout_path(7), "u1") == 3

def test_invalidate_is_idempotent():
    c = ViewCache()
    c.invalidate(DASHBOARD_PATH, workout_path(1))
    c.invalidate(DASHBOARD_PATH)
    assert DASHBOARD_PATH not in c

def test_disabled_cache_never_stores():
    c = ViewCache(enabled=False)
    c.set(DASHBOARD_PATH, "k", "v")
    assert c.get(DASHBOARD_PATH, "k") is None

def test_workout_path():
    assert workout_path(12) == "/workouts/12"

def test_each_path_is_capped_least_recently_used_first():
    c = ViewCache(max_entries=3)
    for n in range(1, 4):
        c.set(DASHBOARD_PATH, ("u1", f"2031-02-0{n}"), n)
    c.get(DASHBOARD_PATH, ("u1", "2031-02-01"))  # touch the oldest
    c.set(DASHBOARD_PATH, ("u1", "2031-02-04"), 4)

    assert c.size(DASHBOARD_PATH) == 3
    assert c.get(DASHBOARD_PATH, ("u1", "2031-02-02")) is None
    assert c.get(DASHBOARD_PATH, ("u1", "2031-02-01")) == 1
    assert c.get(DASHBOARD_PATH, ("u1", "2031-02-04")) == 4

def test_cap_applies_per_path():
    c = ViewCache(max_entries=1)
    c.set(DASHBOARD_PATH, "a", 1)
    c.set(workout_path(1), "a", 2)
    assert c.size(DASHBOARD_PATH) == 1
    assert c.size(workout_path(1)) == 1

def test_max_entries_must_be_positive():
    with pytest.raises(ValueError):
        ViewCache(max_entries=0)
