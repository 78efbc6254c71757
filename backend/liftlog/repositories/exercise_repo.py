from __future__ import annotations
from typing import Iterable, Optional
from sqlalchemy import select, func
from liftlog.models import Exercise
from liftlog.repositories.base import BaseRepository

DEFAULT_EXERCISES = (
    # Chest
    "Bench Press", "Incline Bench Press", "Decline Bench Press", "Dumbbell Bench Press",
    "Dumbbell Flyes", "Push-ups", "Cable Flyes",
    # Back
    "Deadlift", "Barbell Row", "Dumbbell Row", "Pull-ups", "Chin-ups", "Lat Pulldown",
    "Seated Cable Row", "T-Bar Row",
    # Shoulders
    "Overhead Press", "Dumbbell Shoulder Press", "Lateral Raises", "Front Raises",
    "Rear Delt Flyes", "Face Pulls", "Upright Row",
    # Arms
    "Barbell Curl", "Dumbbell Curl", "Hammer Curl", "Preacher Curl", "Tricep Pushdown",
    "Overhead Tricep Extension", "Skull Crushers", "Close-Grip Bench Press",
    # Legs
    "Squat", "Front Squat", "Leg Press", "Romanian Deadlift", "Leg Curl", "Leg Extension",
    "Calf Raises", "Walking Lunges", "Bulgarian Split Squat",
    # Core
    "Plank", "Crunches", "Russian Twists", "Hanging Leg Raises", "Cable Crunches",
)

class ExerciseRepository(BaseRepository[Exercise]):
    """The exercise catalog is shared by every user, so nothing here is owner scoped."""
    model = Exercise

    def get(self, exercise_id: int) -> Optional[Exercise]:
        return self.db.get(Exercise, exercise_id)

    def get_by_name(self, name: str) -> Optional[Exercise]:
        stmt = select(Exercise).where(Exercise.name == name)
        return self.db.execute(stmt).scalar_one_or_none()

    def list_all(self) -> list[Exercise]:
        stmt = select(Exercise).order_by(Exercise.name.asc())
        return list(self.db.execute(stmt).scalars().all())

    def count(self) -> int:
        return self.db.execute(select(func.count()).select_from(Exercise)).scalar_one()

    def create(self, name: str) -> Exercise:
        # A duplicate name surfaces as IntegrityError from the unique constraint
        return self.add_and_refresh(Exercise(name=name))

    def seed_defaults(self, names: Iterable[str] = DEFAULT_EXERCISES) -> int:
        """Insert ``names`` when the catalog is empty. Returns how many were added."""
        if self.count() > 0:
            return 0
        added = 0
        for name in names:
            self.db.add(Exercise(name=name))
            added += 1
        self.db.commit()
        return added
