from __future__ import annotations
import logging
from typing import Optional
from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError
from liftlog.errors import NotFoundError
from liftlog.models import Exercise, Workout, WorkoutExercise
from liftlog.repositories.base import BaseRepository, owned_workout_ids

log = logging.getLogger("uvicorn")

class WorkoutExerciseRepository(BaseRepository[WorkoutExercise]):
    model = WorkoutExercise

    def get(self, owner_id: str, workout_exercise_id: int) -> Optional[WorkoutExercise]:
        stmt = select(WorkoutExercise).where(
            WorkoutExercise.id == workout_exercise_id,
            WorkoutExercise.workout_id.in_(owned_workout_ids(owner_id)),
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def add(self, owner_id: str, *, workout_id: int, exercise_id: int, order: int = 0) -> WorkoutExercise:
        workout = self.db.execute(
            select(Workout.id).where(Workout.id == workout_id, Workout.user_id == owner_id).limit(1)
        ).scalar_one_or_none()
        if workout is None:
            raise NotFoundError("Workout not found")

        if self.db.get(Exercise, exercise_id) is None:
            raise NotFoundError(f"Exercise with ID {exercise_id} not found")

        we = WorkoutExercise(workout_id=workout_id, exercise_id=exercise_id, order=order)
        try:
            return self.add_and_refresh(we)
        except IntegrityError:
            # Parent deleted between the checks and the insert; the FK has the final say
            self.db.rollback()
            log.exception("Failed to add exercise to workout: workout_id=%s exercise_id=%s order=%s",
                          workout_id, exercise_id, order)
            raise NotFoundError("Workout not found")

    def remove(self, owner_id: str, workout_exercise_id: int, *, workout_id: int | None = None) -> bool:
        """Detach an exercise (and its sets, ON DELETE CASCADE).

        With ``workout_id`` the row must also belong to that workout.
        """
        stmt = delete(WorkoutExercise)\
            .where(
                WorkoutExercise.id == workout_exercise_id,
                WorkoutExercise.workout_id.in_(owned_workout_ids(owner_id, workout_id)),
            )\
            .execution_options(synchronize_session=False)
        deleted = self.db.execute(stmt).rowcount
        self.db.commit()
        return deleted > 0
