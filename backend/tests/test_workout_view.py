import datetime as dt
from decimal import Decimal
from types import SimpleNamespace as NS

from liftlog.repositories.workout_view import flatten_rows, format_weight

DAY = dt.date(2025, 6, 1)

def workout(id, name=None, notes=None):
    return NS(id=id, name=name, date=DAY, notes=notes, started_at=None, completed_at=None)

def wex(id, order=0):
    return NS(id=id, order=order)

def exercise(id, name):
    return NS(id=id, name=name)

def wset(id, n, weight=None, reps=None):
    return NS(id=id, set_number=n, weight=weight, reps=reps)

def test_no_rows():
    assert flatten_rows([]) == []

def test_workout_without_exercises():
    out = flatten_rows([(workout(1, "Rest"), None, None, None)])
    assert len(out) == 1
    assert out[0].name == "Rest"
    assert out[0].exercises == []

def test_exercise_without_sets():
    w = workout(1)
    out = flatten_rows([(w, wex(10), exercise(3, "Squat"), None)])
    assert [e.name for e in out[0].exercises] == ["Squat"]
    assert out[0].exercises[0].sets == []
    assert out[0].exercises[0].exercise_id == 3

def test_groups_in_first_seen_order():
    w1, w2 = workout(1), workout(2)
    bench, squat = exercise(1, "Bench Press"), exercise(3, "Squat")
    we_a, we_b, we_c = wex(10, 0), wex(11, 1), wex(20, 0)
    rows = [
        (w2, we_c, bench, wset(200, 1, Decimal("100"), 5)),
        (w1, we_a, squat, wset(100, 1, Decimal("135"), 10)),
        (w1, we_a, squat, wset(101, 2, Decimal("155"), 8)),
        (w1, we_b, bench, None),
    ]
    out = flatten_rows(rows)
    assert [w.id for w in out] == [2, 1]
    assert [e.id for e in out[1].exercises] == [10, 11]
    sets = [(s.set_number, s.weight, s.reps) for s in out[1].exercises[0].sets]
    assert sets == [(1, "135.00", 10), (2, "155.00", 8)]
    assert out[1].exercises[1].sets == []

def test_rows_without_workout_are_skipped():
    out = flatten_rows([(None, None, None, None), (workout(5), None, None, None)])
    assert [w.id for w in out] == [5]

def test_half_joined_exercise_is_ignored():
    # workout-exercise row whose catalog entry did not join
    out = flatten_rows([(workout(1), wex(10), None, None)])
    assert out[0].exercises == []

def test_format_weight():
    assert format_weight(None) is None
    assert format_weight(Decimal("135")) == "135.00"
    assert format_weight(Decimal("62.5")) == "62.50"
    assert format_weight(102.25) == "102.25"
