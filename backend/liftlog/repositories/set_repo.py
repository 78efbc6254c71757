from __future__ import annotations
import logging
from decimal import Decimal
from typing import Optional
from sqlalchemy import select, update, delete
from sqlalchemy.exc import IntegrityError
from liftlog.errors import NotFoundError
from liftlog.models import WorkoutExercise, WorkoutSet
from liftlog.repositories.base import (
    BaseRepository,
    owned_workout_exercise_ids,
    owned_workout_ids,
    to_weight,
)

log = logging.getLogger("uvicorn")

class SetRepository(BaseRepository[WorkoutSet]):
    """Sets are reached through workout-exercise -> workout -> owner.

    Mutations take an optional ``workout_id``; when given, the set must sit
    under that workout as well.
    """
    model = WorkoutSet

    UPDATABLE = frozenset({"weight", "reps"})

    def get(self, owner_id: str, set_id: int) -> Optional[WorkoutSet]:
        stmt = select(WorkoutSet).where(
            WorkoutSet.id == set_id,
            WorkoutSet.workout_exercise_id.in_(owned_workout_exercise_ids(owner_id)),
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def list_by_workout_exercise(self, owner_id: str, workout_exercise_id: int) -> list[WorkoutSet]:
        stmt = select(WorkoutSet)\
            .where(
                WorkoutSet.workout_exercise_id == workout_exercise_id,
                WorkoutSet.workout_exercise_id.in_(owned_workout_exercise_ids(owner_id)),
            )\
            .order_by(WorkoutSet.set_number.asc(), WorkoutSet.id.asc())
        return list(self.db.execute(stmt).scalars().all())

    def create(
        self,
        owner_id: str,
        *,
        workout_exercise_id: int,
        set_number: int,
        weight: Decimal | str | None = None,
        reps: int | None = None,
        workout_id: int | None = None,
    ) -> WorkoutSet:
        parent = self.db.execute(
            select(WorkoutExercise.id)
            .where(
                WorkoutExercise.id == workout_exercise_id,
                WorkoutExercise.workout_id.in_(owned_workout_ids(owner_id, workout_id)),
            )
            .limit(1)
        ).scalar_one_or_none()
        if parent is None:
            raise NotFoundError("Workout exercise not found")

        s = WorkoutSet(
            workout_exercise_id=workout_exercise_id,
            set_number=set_number,
            weight=to_weight(weight),
            reps=reps,
        )
        try:
            return self.add_and_refresh(s)
        except IntegrityError:
            self.db.rollback()
            log.exception("Failed to create set: workout_exercise_id=%s set_number=%s",
                          workout_exercise_id, set_number)
            raise NotFoundError("Workout exercise not found")

    def update(self, owner_id: str, set_id: int, *, workout_id: int | None = None,
               **fields) -> Optional[WorkoutSet]:
        """Change weight and/or reps. None when the set is missing or not the owner's."""
        unknown = set(fields) - self.UPDATABLE
        if unknown:
            raise ValueError(f"cannot update set fields: {sorted(unknown)}")
        if "weight" in fields:
            fields["weight"] = to_weight(fields["weight"])
        scope = owned_workout_exercise_ids(owner_id, workout_id)
        if not fields:
            stmt = select(WorkoutSet).where(WorkoutSet.id == set_id, WorkoutSet.workout_exercise_id.in_(scope))
            return self.db.execute(stmt).scalar_one_or_none()

        stmt = update(WorkoutSet)\
            .where(WorkoutSet.id == set_id, WorkoutSet.workout_exercise_id.in_(scope))\
            .values(**fields)\
            .execution_options(synchronize_session=False)
        result = self.db.execute(stmt)
        if result.rowcount == 0:
            self.db.rollback()
            return None
        self.db.commit()
        return self.get(owner_id, set_id)

    def delete(self, owner_id: str, set_id: int, *, workout_id: int | None = None) -> bool:
        stmt = delete(WorkoutSet)\
            .where(
                WorkoutSet.id == set_id,
                WorkoutSet.workout_exercise_id.in_(owned_workout_exercise_ids(owner_id, workout_id)),
            )\
            .execution_options(synchronize_session=False)
        deleted = self.db.execute(stmt).rowcount
        self.db.commit()
        return deleted > 0
