"""Flatten workout → workout-exercise → exercise → set join rows into nested views.

The join yields one row per set (or a single row with ``None`` children when a
workout has no exercises, or an exercise has no sets). Rows are walked once and
grouped by workout id, then by workout-exercise id, in first-seen order, so the
query's ``ORDER BY`` decides the order of exercises and sets in the result.
"""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, Optional, Tuple

from liftlog.models import Exercise, Workout, WorkoutExercise, WorkoutSet

JoinRow = Tuple[Workout, Optional[WorkoutExercise], Optional[Exercise], Optional[WorkoutSet]]


@dataclass(slots=True)
class LoggedSet:
    id: int
    set_number: int
    weight: str | None
    reps: int | None


@dataclass(slots=True)
class LoggedExercise:
    id: int  # workout-exercise id, not the catalog id
    exercise_id: int
    name: str
    order: int
    sets: list[LoggedSet] = field(default_factory=list)


@dataclass(slots=True)
class LoggedWorkout:
    id: int
    name: str | None
    date: dt.date
    notes: str | None
    started_at: dt.datetime | None = None
    completed_at: dt.datetime | None = None
    exercises: list[LoggedExercise] = field(default_factory=list)


def format_weight(weight: Decimal | float | None) -> str | None:
    """Render a NUMERIC(6,2) weight the way the store does: ``"135.00"``."""
    if weight is None:
        return None
    return f"{Decimal(str(weight)):.2f}"


def flatten_rows(rows: Iterable[JoinRow]) -> list[LoggedWorkout]:
    workouts: dict[int, LoggedWorkout] = {}
    exercises: dict[int, dict[int, LoggedExercise]] = {}

    for workout, workout_exercise, exercise, workout_set in rows:
        if workout is None:
            continue

        if workout.id not in workouts:
            workouts[workout.id] = LoggedWorkout(
                id=workout.id,
                name=workout.name,
                date=workout.date,
                notes=workout.notes,
                started_at=workout.started_at,
                completed_at=workout.completed_at,
            )
            exercises[workout.id] = {}

        if workout_exercise is None or exercise is None:
            continue

        by_id = exercises[workout.id]
        entry = by_id.get(workout_exercise.id)
        if entry is None:
            entry = by_id[workout_exercise.id] = LoggedExercise(
                id=workout_exercise.id,
                exercise_id=exercise.id,
                name=exercise.name,
                order=workout_exercise.order,
            )

        if workout_set is not None:
            entry.sets.append(
                LoggedSet(
                    id=workout_set.id,
                    set_number=workout_set.set_number,
                    weight=format_weight(workout_set.weight),
                    reps=workout_set.reps,
                )
            )

    for workout_id, logged in workouts.items():
        logged.exercises = list(exercises[workout_id].values())
    return list(workouts.values())
