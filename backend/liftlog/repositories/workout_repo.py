from __future__ import annotations
import datetime as dt
from typing import Optional
from sqlalchemy import select, update, delete
from liftlog.models import Exercise, Workout, WorkoutExercise, WorkoutSet
from liftlog.repositories.base import BaseRepository
from liftlog.repositories.workout_view import LoggedWorkout, flatten_rows

class WorkoutRepository(BaseRepository[Workout]):
    model = Workout

    UPDATABLE = frozenset({"name", "date", "notes", "started_at", "completed_at"})

    # READS
    def get(self, owner_id: str, workout_id: int) -> Optional[Workout]:
        stmt = select(Workout).where(Workout.id == workout_id, Workout.user_id == owner_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def list_by_date(self, owner_id: str, day: dt.date) -> list[Workout]:
        stmt = select(Workout).where(Workout.user_id == owner_id, Workout.date == day)\
                              .order_by(Workout.id.asc())
        return list(self.db.execute(stmt).scalars().all())

    def _joined(self):
        return (
            select(Workout, WorkoutExercise, Exercise, WorkoutSet)
            .select_from(Workout)
            .outerjoin(WorkoutExercise, WorkoutExercise.workout_id == Workout.id)
            .outerjoin(Exercise, Exercise.id == WorkoutExercise.exercise_id)
            .outerjoin(WorkoutSet, WorkoutSet.workout_exercise_id == WorkoutExercise.id)
            .order_by(
                # equal `order` keeps insertion order; each exercise stays contiguous
                WorkoutExercise.order.asc(),
                WorkoutExercise.id.asc(),
                WorkoutSet.set_number.asc(),
                WorkoutSet.id.asc(),
            )
        )

    def get_day(self, owner_id: str, day: dt.date) -> list[LoggedWorkout]:
        """Every workout the owner logged on ``day`` with exercises and sets nested."""
        stmt = self._joined().where(Workout.user_id == owner_id, Workout.date == day)
        return flatten_rows(self.db.execute(stmt).all())

    def get_detail(self, owner_id: str, workout_id: int) -> Optional[LoggedWorkout]:
        stmt = self._joined().where(Workout.user_id == owner_id, Workout.id == workout_id)
        found = flatten_rows(self.db.execute(stmt).all())
        return found[0] if found else None

    # WRITES
    def create(self, owner_id: str, *, day: dt.date, name: str | None = None,
               notes: str | None = None) -> Workout:
        return self.add_and_refresh(Workout(user_id=owner_id, date=day, name=name, notes=notes))

    def update(self, owner_id: str, workout_id: int, **fields) -> Optional[Workout]:
        """Apply ``fields`` to the owner's workout.

        Returns None when nothing matched: the workout is missing or belongs to
        someone else. No error is raised in either case.
        """
        unknown = set(fields) - self.UPDATABLE
        if unknown:
            raise ValueError(f"cannot update workout fields: {sorted(unknown)}")
        if not fields:
            return self.get(owner_id, workout_id)

        stmt = update(Workout)\
            .where(Workout.id == workout_id, Workout.user_id == owner_id)\
            .values(**fields)\
            .execution_options(synchronize_session=False)
        result = self.db.execute(stmt)
        if result.rowcount == 0:
            self.db.rollback()
            return None
        self.db.commit()
        return self.get(owner_id, workout_id)

    def delete(self, owner_id: str, workout_id: int) -> bool:
        # workout_exercises and their sets go with it (ON DELETE CASCADE)
        stmt = delete(Workout)\
            .where(Workout.id == workout_id, Workout.user_id == owner_id)\
            .execution_options(synchronize_session=False)
        deleted = self.db.execute(stmt).rowcount
        self.db.commit()
        return deleted > 0
