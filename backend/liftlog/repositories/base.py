# liftlog/repositories/base.py
from __future__ import annotations
from decimal import Decimal
from typing import Generic, TypeVar

from sqlalchemy.orm import Session
from sqlalchemy import Select, select

from liftlog.models import Workout, WorkoutExercise

T = TypeVar("T")  # SQLAlchemy model type

class BaseRepository(Generic[T]):
    """Lightweight base for repositories using SQLAlchemy 2.0 style."""
    model: type[T]

    def __init__(self, db: Session):
        self.db = db

    def add_and_refresh(self, entity: T) -> T:
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity


# Ownership scopes. Owner ids are always passed in by the caller (taken from
# the verified token), never read from request payloads. ``workout_id`` narrows
# the scope to one of the owner's workouts.
def owned_workout_ids(owner_id: str, workout_id: int | None = None) -> Select:
    stmt = select(Workout.id).where(Workout.user_id == owner_id)
    if workout_id is not None:
        stmt = stmt.where(Workout.id == workout_id)
    return stmt

def owned_workout_exercise_ids(owner_id: str, workout_id: int | None = None) -> Select:
    return select(WorkoutExercise.id).where(
        WorkoutExercise.workout_id.in_(owned_workout_ids(owner_id, workout_id))
    )


def to_weight(value: Decimal | str | None) -> Decimal | None:
    if value is None:
        return None
    return Decimal(value)
